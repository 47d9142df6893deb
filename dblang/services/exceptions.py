"""Domain-specific exceptions."""


class LangLibError(Exception):
    pass


class DatabaseLibraryError(LangLibError):
    def __init__(self, detail: str | None = None) -> None:
        message = (
            "The SQLite library may be: wrong version/wrong processor "
            "architecture/missing native module/etc.."
        )
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class MissingCatalogError(LangLibError):
    pass


class CultureNotFoundError(LangLibError):
    pass
