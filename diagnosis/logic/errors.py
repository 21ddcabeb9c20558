"""
Diagnosis Errors

Typed, request-scoped failures with a stable error code. Routes translate
them into JSON responses; nothing here is retried.
"""

from typing import Any, Dict, List, Optional


class DiagnosisError(Exception):
    code = "INTERNAL_ERROR"
    status_code = 500
    message = "サーバーエラーが発生しました。"

    def __init__(self, message: Optional[str] = None, debug: Optional[Dict[str, Any]] = None):
        self.message = message or self.message
        self.debug = debug or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"error": self.code, "message": self.message}
        if self.debug:
            payload["debug"] = self.debug
        return payload


class NoSchoolId(DiagnosisError):
    code = "NO_SCHOOL_ID"
    status_code = 400
    message = "schoolId が指定されていません。"


class InvalidRequest(DiagnosisError):
    """Body is not a {schoolId, answers} object of strings."""
    code = "INVALID_REQUEST"
    status_code = 400
    message = "リクエストの形式が正しくありません。"

    @classmethod
    def from_errors(cls, errors: List[Dict[str, Any]]) -> "InvalidRequest":
        fields = [".".join(str(p) for p in e.get("loc", ())) for e in errors]
        return cls(debug={"fields": fields})


class MissingAnswers(DiagnosisError):
    code = "MISSING_ANSWERS"
    status_code = 400

    def __init__(self, missing: List[str]):
        self.missing = list(missing)
        super().__init__(
            f"未回答の質問があります: {', '.join(self.missing)}",
            debug={"missing": self.missing},
        )


class NoCampus(DiagnosisError):
    code = "NO_CAMPUS"
    status_code = 400

    def __init__(self, slug: Optional[str]):
        super().__init__("選択した校舎が見つかりません。", debug={"campusSlug": slug})


class NoGenre(DiagnosisError):
    code = "NO_GENRE"
    status_code = 400

    def __init__(self, slug: Optional[str]):
        super().__init__("選択したジャンルが見つかりません。", debug={"genreSlug": slug})


class NoMatchedResult(DiagnosisError):
    code = "NO_MATCHED_RESULT"
    status_code = 400
    message = "診断結果が登録されていません。"


class InternalError(DiagnosisError):
    """Unexpected failure; carries the underlying message for the operator."""

    @classmethod
    def wrap(cls, exc: Exception) -> "InternalError":
        return cls(debug={"detail": str(exc)})
