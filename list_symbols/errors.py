class ListSymbolsError(Exception):
    pass


class UsageError(ListSymbolsError):
    pass


class ParseError(ListSymbolsError):
    def __init__(self, path: str, message: str = "unable to parse translation unit"):
        super().__init__(message)
        self.path = path
        self.message = message

    def __str__(self) -> str:
        return f"{self.message}: {self.path}"


class LibclangNotFoundError(ListSymbolsError):
    def __init__(self, library_file: str):
        super().__init__(f"libclang library not found: {library_file}")
        self.library_file = library_file
