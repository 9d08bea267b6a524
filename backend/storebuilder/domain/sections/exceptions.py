"""
Errors raised by the section composition engine.

Every error carries a stable ``code`` and a human-readable message so the
editor can tell the user *why* an operation was refused.
"""
from typing import Optional


class SectionError(Exception):
    code = "SectionError"
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PermissionDenied(SectionError):
    code = "PermissionDenied"
    status_code = 403

    def __init__(self, section_type: str, page_type: str, label: Optional[str] = None):
        super().__init__(
            f"{label or section_type} sections are not available for {page_type} pages"
        )
        self.section_type = section_type
        self.page_type = page_type


class QuotaExceeded(SectionError):
    code = "QuotaExceeded"
    status_code = 409

    def __init__(self, page_type: str, max_sections: int):
        super().__init__(
            f"Maximum of {max_sections} sections reached for {page_type} pages"
        )
        self.page_type = page_type
        self.max_sections = max_sections


class UnknownSectionType(SectionError):
    code = "UnknownSectionType"

    def __init__(self, section_type: str):
        super().__init__(f"Unknown section type: {section_type}")
        self.section_type = section_type


class UnknownPageType(SectionError):
    code = "UnknownPageType"

    def __init__(self, page_type: str):
        super().__init__(f"Unknown page type: {page_type}")
        self.page_type = page_type


class SectionNotFound(SectionError):
    code = "SectionNotFound"
    status_code = 404

    def __init__(self, section_id: str):
        super().__init__(f"Section {section_id} not found on this page")
        self.section_id = section_id


class ReorderMismatch(SectionError):
    code = "ReorderMismatch"

    def __init__(self, missing, unexpected):
        super().__init__(
            "Reorder must list every section on the page exactly once "
            f"(missing: {sorted(missing)}, unexpected: {sorted(unexpected)})"
        )
        self.missing = set(missing)
        self.unexpected = set(unexpected)


class InvalidConfig(SectionError):
    code = "InvalidConfig"


class StorageUnavailable(SectionError):
    code = "StorageUnavailable"
    status_code = 503

    def __init__(self, operation: str, detail: Optional[str] = None):
        message = f"Could not reach the server while trying to {operation}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.operation = operation
