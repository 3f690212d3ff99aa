"""Test listing and detail API endpoints."""

from typing import List
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from ..core.catalog import LabTestCatalog
from ..core.normalizer import TextNormalizer
from ..engine_instance import get_catalog
from ..models.response import LabTestDetailResponse, LabTestSummary

router = APIRouter(prefix="/api/v1", tags=["tests"])

NOT_PROVIDED = "Not provided."
NO_SYNONYMS = "None listed."

normalizer = TextNormalizer()


def back_link(query: str) -> str:
    """Link back to the originating search, or home when there was none."""
    if query:
        return f"/api/v1/search?{urlencode({'q': query})}"
    return "/"


@router.get(
    "/tests",
    response_model=List[LabTestSummary],
    summary="List all tests",
    description="Get the identifier and name of every loaded test in dataset order"
)
async def list_tests(catalog: LabTestCatalog = Depends(get_catalog)) -> List[LabTestSummary]:
    """List every test in the catalog."""
    return [LabTestSummary(id=test.id, name=test.name) for test in catalog]


@router.get(
    "/tests/{test_id}",
    response_model=LabTestDetailResponse,
    summary="Get test details",
    description="Get the full description of a single test"
)
async def get_test(
    test_id: str = Path(..., description="The test identifier"),
    q: str = Query("", description="Search query the user came from"),
    catalog: LabTestCatalog = Depends(get_catalog)
) -> LabTestDetailResponse:
    """
    Get the details of a test, with placeholders for missing fields.
    
    The originating query only feeds the back link.
    """
    test = catalog.get(test_id)
    if test is None:
        raise HTTPException(
            status_code=404,
            detail="That test record was not found in the dataset."
        )
    
    synonyms = normalizer.tokenize_synonyms(test.synonyms)
    
    return LabTestDetailResponse(
        id=test.id,
        name=test.name,
        clinical_purpose=test.clinical_purpose or NOT_PROVIDED,
        biomarker_or_parameter=test.biomarker_or_parameter or NOT_PROVIDED,
        range_or_values=test.range_or_values or NOT_PROVIDED,
        meaning_result_interpretation=test.meaning_result_interpretation or NOT_PROVIDED,
        general_notes=test.general_notes or NOT_PROVIDED,
        synonyms=synonyms,
        synonyms_display=", ".join(synonyms) if synonyms else NO_SYNONYMS,
        back_to=back_link(q)
    )
