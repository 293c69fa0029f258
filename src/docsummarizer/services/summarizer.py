"""OpenAI-powered document summarization service using Chat Completions."""

import logging

from openai import AsyncOpenAI

from docsummarizer.config import get_settings
from docsummarizer.domain.errors import SummaryGenerationError
from docsummarizer.domain.summary import SummaryType

logger = logging.getLogger(__name__)
settings = get_settings()


SYSTEM_PROMPT = (
    "You are an expert document summarizer. Provide accurate, well-structured "
    "summaries that capture the essence of the original text while being concise "
    "and readable."
)

STANDARD_PROMPT = """Please provide a comprehensive summary of the following text. The summary should be:
- Clear and concise
- Well-structured
- Capture the main points and key information
- Maintain the original meaning and context

Text to summarize:
{text}

Please provide the summary in a well-formatted manner."""

EXECUTIVE_PROMPT = """Please provide an executive summary of the following text. The summary should be:
- High-level overview focused on business implications
- Concise and actionable
- Highlight key decisions, recommendations, and business impact
- Suitable for busy executives and decision-makers

Text to summarize:
{text}

Please provide the executive summary in a clear, business-appropriate format."""

TECHNICAL_PROMPT = """Please provide a technical summary of the following text. The summary should be:
- Detailed technical analysis
- Include technical specifications, methodologies, and technical implications
- Maintain technical accuracy and precision
- Suitable for technical professionals and engineers

Text to summarize:
{text}

Please provide the technical summary with appropriate technical detail."""

BULLET_POINTS_PROMPT = """Please provide a bullet-point summary of the following text. The summary should be:
- Organized in clear, concise bullet points
- Easy to scan and understand quickly
- Capture all main points and key information
- Use proper bullet point hierarchy when needed

Text to summarize:
{text}

Please provide the summary in well-structured bullet points."""

PROMPTS: dict[SummaryType, str] = {
    SummaryType.STANDARD: STANDARD_PROMPT,
    SummaryType.EXECUTIVE: EXECUTIVE_PROMPT,
    SummaryType.TECHNICAL: TECHNICAL_PROMPT,
    SummaryType.BULLET_POINTS: BULLET_POINTS_PROMPT,
}


def build_prompt(text: str, summary_type: SummaryType | str | None = None) -> str:
    """Render the instruction template for a style, embedding the full text."""
    template = PROMPTS[SummaryType.parse(summary_type)]
    # str.replace keeps braces in the document text intact
    return template.replace("{text}", text)


class SummarizerService:
    """Service for generating AI summaries of extracted document text."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        base_url: str | None = None,
    ) -> None:
        """Initialize the summarizer."""
        self.api_key = api_key if api_key is not None else settings.openai_api_key
        self.client = AsyncOpenAI(
            api_key=self.api_key or "missing",
            base_url=base_url or settings.openai_base_url,
        )
        self.model = model or settings.summarization_model
        self.max_tokens = settings.summary_max_tokens
        self.temperature = settings.summary_temperature

    async def generate_summary(
        self,
        text: str,
        summary_type: SummaryType | str | None = SummaryType.STANDARD,
    ) -> str:
        """Generate a summary for document text.

        Raises:
            SummaryGenerationError: the service failed or returned no content
        """
        if not self.api_key:
            logger.warning("OpenAI API key not configured")
            raise SummaryGenerationError("Failed to generate AI summary")

        style = SummaryType.parse(summary_type)
        try:
            completion = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": build_prompt(text, style)},
                ],
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except Exception as e:
            logger.error(f"AI summarization error: {e}")
            raise SummaryGenerationError("Failed to generate AI summary") from e

        content = completion.choices[0].message.content if completion.choices else None
        if not content or not content.strip():
            logger.error(f"No summary generated by {self.model}")
            raise SummaryGenerationError("No summary generated")

        logger.info(f"Generated {style} summary ({len(text)} chars in)")
        return content.strip()
