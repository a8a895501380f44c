"""
Custom exceptions for specfix.

Provides structured error handling with detailed context for debugging and user feedback.
"""

class RewriterError(Exception):
    """Base exception for rewriter errors."""
    
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
    
    def to_dict(self) -> dict:
        """Convert to a serializable error report."""
        return {
            'type': self.__class__.__name__,
            'message': self.message,
            'details': self.details
        }


class ConfigurationError(RewriterError):
    """Invalid or incomplete configuration."""
    
    def __init__(self, message: str, config_file: str = None):
        super().__init__(
            message,
            details={'config_file': config_file}
        )


class ParsingError(RewriterError):
    """Failed to parse file."""
    
    def __init__(self, file_path: str, reason: str, line: int = None):
        super().__init__(
            f"Failed to parse {file_path}: {reason}",
            details={
                'file': file_path,
                'reason': reason,
                'line': line
            }
        )


class UnsupportedLanguageError(RewriterError):
    """Source file type not supported."""
    
    def __init__(self, file_path: str, file_extension: str = None):
        super().__init__(
            f"Unsupported source file: {file_path}",
            details={
                'file': file_path,
                'file_extension': file_extension
            }
        )


class CodegenError(RewriterError):
    """Generated native sources could not be relocated."""
    
    def __init__(self, message: str, project_path: str = None):
        super().__init__(
            message,
            details={'project_path': project_path}
        )
