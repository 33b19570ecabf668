from typing import Dict

from fra.schemas import Decision, Verdict

from .config import resolve_locale

DECISION_LABELS: Dict[str, Dict[Decision, str]] = {
    "ko": {
        Decision.UNSUITABLE: "위험-투자 부적합",
        Decision.CAUTION: "주의-투자 신중",
        Decision.SUITABLE: "가능-투자 적합",
        Decision.NONE: "",
    },
    "en": {
        Decision.UNSUITABLE: "unsuitable — risk",
        Decision.CAUTION: "caution — reconsider",
        Decision.SUITABLE: "suitable — viable",
        Decision.NONE: "",
    },
}

VERDICT_ICONS = {
    Verdict.BLOCK: "❌",
    Verdict.CAUTION: "⚠️",
    Verdict.GO: "✅",
}

VERDICT_LABELS: Dict[str, Dict[Verdict, str]] = {
    "ko": {Verdict.BLOCK: "불가", Verdict.CAUTION: "신중", Verdict.GO: "가능"},
    "en": {Verdict.BLOCK: "Blocked", Verdict.CAUTION: "Caution", Verdict.GO: "Go"},
}

TEXT: Dict[str, Dict[str, str]] = {
    "ko": {
        "title": "재무비율 분석",
        "name": "회사명",
        "current_assets": "유동자산",
        "current_liabilities": "유동부채",
        "total_debt": "총부채",
        "equity": "자본",
        "current_ratio": "유동비율",
        "debt_ratio": "부채비율",
        "decision": "투자 판단",
        "short_term": "단기 투자",
        "long_term": "장기 투자",
        "actions": "관리",
        "save": "저장",
        "reset": "초기화",
        "edit": "수정",
        "delete": "삭제",
        "confirm_delete": "삭제하시겠습니까?",
        "cancel": "취소",
        "empty": "데이터가 없습니다. 상단 폼에서 추가하세요.",
        "name_required": "회사명을 입력하세요.",
        "saved": "저장되었습니다.",
        "records": "기업 목록",
    },
    "en": {
        "title": "Financial Ratio Analysis",
        "name": "Company name",
        "current_assets": "Current assets",
        "current_liabilities": "Current liabilities",
        "total_debt": "Total debt",
        "equity": "Equity",
        "current_ratio": "Current ratio",
        "debt_ratio": "Debt ratio",
        "decision": "Decision",
        "short_term": "Short term",
        "long_term": "Long term",
        "actions": "Actions",
        "save": "Save",
        "reset": "Reset",
        "edit": "Edit",
        "delete": "Delete",
        "confirm_delete": "Delete this record?",
        "cancel": "Cancel",
        "empty": "No records yet. Add one with the form above.",
        "name_required": "Enter a company name.",
        "saved": "Saved.",
        "records": "Companies",
    },
}


def decision_label(decision: Decision, locale: str | None = None) -> str:
    return DECISION_LABELS[resolve_locale(locale)][decision]


def verdict_label(verdict: Verdict, locale: str | None = None) -> str:
    return f"{VERDICT_ICONS[verdict]} {VERDICT_LABELS[resolve_locale(locale)][verdict]}"


def text(key: str, locale: str | None = None) -> str:
    return TEXT[resolve_locale(locale)][key]
