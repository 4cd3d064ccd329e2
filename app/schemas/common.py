from pydantic import BaseModel


# ─── Success Flag ──────────────────────────────────────────────────────────────
class SuccessFlag(BaseModel):
    success: bool = True


# ─── Error Detail (per field) ──────────────────────────────────────────────────
class ErrorDetail(BaseModel):
    field: str
    message: str


# ─── Error Body ───────────────────────────────────────────────────────────────
class ErrorBody(BaseModel):
    code: str
    details: list[ErrorDetail] | None = None
    field: str | None = None


# ─── Error Response ───────────────────────────────────────────────────────────
class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: ErrorBody


# ─── Helper Functions ─────────────────────────────────────────────────────────
def success_flag(ok: bool = True) -> dict:
    """Return the `{"success": ...}` body used by write endpoints."""
    return {"success": ok}


def error_response(message: str, code: str, details: list | None = None, field: str | None = None) -> dict:
    """Return a standardized error dict (used by exception handlers)."""
    return {
        "success": False,
        "message": message,
        "error": {
            "code": code,
            "details": details,
            "field": field,
        }
    }
