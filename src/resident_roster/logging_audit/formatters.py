"""Custom log formatters for the resident roster.

This module provides specialized formatters for logging, including PII redaction.
"""

import logging
import re
from typing import List, Tuple


class PIIRedactingFormatter(logging.Formatter):
    """Custom formatter that redacts Personally Identifiable Information (PII) from log messages.
    
    Applies regex-based pattern matching to identify and redact resident names,
    dates of birth and Medicare/Medicaid numbers.
    
    Attributes:
        redact_pii: Whether to enable PII redaction
        patterns: List of (regex_pattern, replacement_text) tuples for redaction
        
    Example:
        >>> formatter = PIIRedactingFormatter(
        ...     fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        ...     redact_pii=True
        ... )
        >>> handler = logging.StreamHandler()
        >>> handler.setFormatter(formatter)
    """
    
    def __init__(
        self,
        fmt: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt: str | None = None,
        redact_pii: bool = False,
    ) -> None:
        """Initialize the PIIRedactingFormatter.
        
        Args:
            fmt: Log message format string
            datefmt: Date format string (optional)
            redact_pii: Whether to enable PII redaction
        """
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.redact_pii = redact_pii
        
        # Define redaction patterns: (regex, replacement_text)
        self.patterns: List[Tuple[re.Pattern[str], str]] = [
            # Medicare/Medicaid numbers passed as key=value
            (re.compile(r'\b(medicare|medicaid)=\S+', re.IGNORECASE), r'\1=[ID-REDACTED]'),
            
            # Date of birth passed as key=value: dob=1950-01-02
            (re.compile(r'\bdob=\S+', re.IGNORECASE), 'dob=[DOB-REDACTED]'),
            
            # Roster warnings: "Date of birth 1870-01-01 gives...", "...date: '01/02/1938'"
            (re.compile(r"(Date of birth is not a valid YYYY-MM-DD date:\s*)'[^']*'"),
             r"\1'[DOB-REDACTED]'"),
            (re.compile(r'(Date of birth\s+)\d+-\d+-\d+'), r'\1[DOB-REDACTED]'),
            
            # Roster warning: "Duplicate name found: Harold Adams"
            (re.compile(r'(Duplicate name found:\s*)[^\n]+'), r'\1[NAME-REDACTED]'),
            
            # Matches: name="John Doe", name='Jane Smith', name=Bob Jones
            (re.compile(r'name=["\']?([^"\']+)["\']?'), 'name=[NAME-REDACTED]'),
            
            # Matches: "Resident: Doe, John", "Name: Jane Smith"
            (re.compile(r'(Resident|Name):\s+[A-Z][\w\'-]*,?(?:\s+[A-Z][\w\'-]*)+'),
             r'\1: [NAME-REDACTED]'),
        ]
    
    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with optional PII redaction.
        
        Args:
            record: Log record to format
            
        Returns:
            Formatted log message with PII redacted if enabled
        """
        original = super().format(record)
        
        if self.redact_pii:
            for pattern, replacement in self.patterns:
                original = pattern.sub(replacement, original)
        
        return original
