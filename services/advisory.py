from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Sequence

from models.company_record import CompanyRecord
from ports.llm import LLMClientPort


logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "El asesor no está disponible en este momento. Inténtalo de nuevo más tarde."

PROMPT_TEMPLATE = (
    "You advise on a portfolio of companies. All amounts are in one currency.\n"
    "Companies (JSON, at most {limit}):\n{records}\n\n"
    "Question: {question}\n"
    "Answer in plain prose, citing companies by name."
)


def project_record(record: CompanyRecord) -> Dict[str, Any]:
    """Compact projection sent to the model; absent amounts stay null."""
    return {
        "name": record.display_name,
        "category": record.category,
        "revenue": record.revenue,
        "ebitda": record.ebitda,
        "net_income": record.net_income,
        "employees": record.employee_count,
    }


class AdvisoryService:
    def __init__(self, llm: LLMClientPort, max_records: int = 10) -> None:
        self.llm = llm
        self.max_records = max_records

    def build_prompt(self, question: str, records: Sequence[CompanyRecord]) -> str:
        projection: List[Dict[str, Any]] = [project_record(r) for r in list(records)[: self.max_records]]
        return PROMPT_TEMPLATE.format(
            limit=self.max_records,
            records=json.dumps(projection, ensure_ascii=False),
            question=question.strip(),
        )

    def advise(self, question: str, records: Sequence[CompanyRecord]) -> str:
        """Ask the advisory model; any failure yields FALLBACK_MESSAGE instead of an error."""
        prompt = self.build_prompt(question, records)
        try:
            answer = self.llm.complete(use_case="advisory", prompt=prompt, prompt_name="portfolio_advice")
        except Exception as e:
            logger.warning("Advisory call failed", extra={"step": "advise", "status": "error", "error": str(e)})
            return FALLBACK_MESSAGE
        if not isinstance(answer, str) or not answer.strip():
            return FALLBACK_MESSAGE
        return answer.strip()
