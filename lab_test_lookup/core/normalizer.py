"""Text normalization utilities for consistent test name matching."""

import re
from typing import List, Optional

SYNONYM_DELIMITER = "|"
SLUG_MAX_LENGTH = 80
SLUG_FALLBACK = "test"


class TextNormalizer:
    """Handles text normalization for name and synonym comparison."""
    
    def __init__(self) -> None:
        """Initialize the normalizer."""
        # Anything outside [a-z0-9] collapses to one separator in slugs
        self.slug_regex = re.compile(r'[^a-z0-9]+')
    
    def normalize(self, text: Optional[str]) -> str:
        """
        Normalize text for comparison.
        
        Args:
            text: Input text, may be None
            
        Returns:
            Lowercased text without leading/trailing whitespace
        """
        if not text:
            return ""
        
        return text.lower().strip()
    
    def tokenize_synonyms(self, raw: Optional[str]) -> List[str]:
        """
        Split a pipe-delimited synonym field into alternate names.
        
        Tokens are trimmed, empty tokens are dropped and source order
        is preserved. Duplicates are kept.
        
        Args:
            raw: Raw synonym field, e.g. "FBC|Complete Blood Count"
            
        Returns:
            List of synonym tokens
        """
        if not raw:
            return []
        
        tokens = (token.strip() for token in raw.split(SYNONYM_DELIMITER))
        return [token for token in tokens if token]
    
    def normalized_synonyms(self, raw: Optional[str]) -> List[str]:
        """Tokenize a synonym field and normalize every token."""
        return [self.normalize(token) for token in self.tokenize_synonyms(raw)]
    
    def slugify(self, text: Optional[str]) -> str:
        """
        Derive a URL-safe identifier from a display name.
        
        Args:
            text: Display name
            
        Returns:
            Slug of at most SLUG_MAX_LENGTH characters, or SLUG_FALLBACK
        """
        slug = self.slug_regex.sub('-', self.normalize(text))
        slug = slug.strip('-')[:SLUG_MAX_LENGTH]
        return slug or SLUG_FALLBACK
