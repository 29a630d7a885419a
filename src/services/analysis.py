"""
PCOS type analysis from a symptom questionnaire.
"""
from aws_lambda_powertools import Logger
from pydantic import ValidationError

from src.models.recommendation import PcosAnalysisRequest, PcosAnalysisResult
from src.services.exceptions import AIServiceError

logger = Logger()

SYSTEM_PROMPT = "You are a specialized gynecological health assistant helping identify PCOS types."

ANALYSIS_PROMPT = """Analyze the following patient profile for PCOS type and give recommendations.
Symptoms: {symptoms}
Cycle Regularity: {cycle_regularity}
Physical Signs:
- Weight Concerns: {weight_concerns}
- Hair Growth (Hirsutism): {hair_growth}
- Acne: {acne}
- Fatigue: {fatigue}

Determine the most likely PCOS type from: 'insulin_resistant', 'inflammatory', 'adrenal', 'post_pill'.
If unclear, use 'unknown'.
Provide a confidence score (0-1).
Explain why.
Give 3 top recommendations.

Respond in JSON format:
{{
  "detected_type": "enum value",
  "confidence": number,
  "explanation": "string",
  "recommendations": ["string"]
}}"""

class PcosAnalysisService:
    def __init__(self, llm=None):
        self._llm = llm

    @property
    def llm(self):
        if self._llm is None:
            from src.utils.clients import get_llm
            self._llm = get_llm()
        return self._llm

    def build_prompt(self, request: PcosAnalysisRequest) -> str:
        return ANALYSIS_PROMPT.format(
            symptoms=", ".join(request.symptoms) or "none reported",
            cycle_regularity=request.cycle_regularity.value,
            weight_concerns=request.weight_concerns,
            hair_growth=request.hair_growth,
            acne=request.acne,
            fatigue=request.fatigue
        )

    def analyze(self, request: PcosAnalysisRequest) -> PcosAnalysisResult:
        """
        Classify the most likely PCOS type.

        Unknown type values from the model become 'unknown' and the confidence
        is clamped to [0, 1].

        Raises:
            AIServiceError: If the model call fails or returns an unusable result
        """
        data = self.llm.complete_json(self.build_prompt(request), system_prompt=SYSTEM_PROMPT)
        try:
            result = PcosAnalysisResult(**data)
        except (ValidationError, TypeError) as e:
            raise AIServiceError(f"Unusable analysis result: {str(e)}") from e

        logger.info("PCOS analysis completed", extra={
            "detected_type": result.detected_type.value,
            "confidence": result.confidence,
            "symptom_count": len(request.symptoms)
        })
        return result
