"""Protocol interfaces for dependency injection from the host application."""

from typing import Protocol, List, Optional, Any

class Segmenter(Protocol):
    """Anything that turns text into a list of sentences."""
    
    def segment(self, text: Optional[str]) -> List[str]:
        """
        Segment text into sentences.
        
        Args:
            text: Input text to segment, or None
            
        Returns:
            List[str]: Sentences in input order
        """
        ...

class Logger(Protocol):
    """Optional structured logging interface."""
    
    def info(self, msg: str, **kv: Any) -> None:
        """Log info level message with optional key-value context."""
        ...
        
    def warn(self, msg: str, **kv: Any) -> None:
        """Log warning level message with optional key-value context."""
        ...
        
    def error(self, msg: str, **kv: Any) -> None:
        """Log error level message with optional key-value context."""
        ...
