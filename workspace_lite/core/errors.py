"""
Erreurs du workspace - chaque type d'échec a sa propre classe
pour que l'appelant (routers, scripts) puisse les distinguer.
"""


class WorkspaceError(Exception):
    """Base exception for workspace errors."""

    message = "Workspace error"

    def __init__(self, message=None, **details):
        super().__init__(message or self.message)
        self.message = message or self.message
        self.details = details

    def to_dict(self):
        return {
            "error": type(self).__name__,
            "message": self.message,
            "details": self.details,
        }


class PageNotFoundError(WorkspaceError, LookupError):
    """La page demandée n'existe pas"""
    message = "Page not found"


class StorageError(WorkspaceError):
    """Le commit sur disque a échoué (disque plein, permissions...)"""
    message = "Storage failure"


class InvalidPageTypeError(WorkspaceError, ValueError):
    message = "Invalid page type"


class InvalidQueryError(WorkspaceError, ValueError):
    message = "Invalid query"
