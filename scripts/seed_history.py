import asyncio
from datetime import UTC, datetime

from docsummarizer.domain.summary import Summary, SummaryType, count_words
from docsummarizer.infrastructure.database import async_session_factory
from docsummarizer.repositories.summary_repo import SummaryRepository

DEMO_SUMMARIES = [
    (
        "1",
        "Project Proposal",
        "project-proposal.pdf",
        datetime(2024, 1, 15, 10, 30, tzinfo=UTC),
        "This project proposal outlines a comprehensive plan for developing a new "
        "AI-powered document summarization platform. The platform will leverage "
        "advanced natural language processing to provide accurate and concise "
        "summaries of various document types including PDFs, DOCX files, and plain "
        "text documents.",
    ),
    (
        "2",
        "Technical Documentation",
        "technical-docs.docx",
        datetime(2024, 1, 14, 14, 20, tzinfo=UTC),
        "The technical documentation provides detailed specifications for the "
        "document summarization system. It covers architecture design, API endpoints, "
        "database schema, and implementation guidelines for the various components "
        "including file processing, AI integration, and export functionality.",
    ),
    (
        "3",
        "Meeting Notes",
        "meeting-notes.txt",
        datetime(2024, 1, 13, 9, 15, tzinfo=UTC),
        "Meeting discussed project timeline, resource allocation, and key "
        "deliverables. Team agreed on two-week sprints with weekly reviews. Budget "
        "approved for initial development phase. Next meeting scheduled for Friday "
        "to review technical specifications.",
    ),
]


async def seed():
    async with async_session_factory() as session:
        repo = SummaryRepository(session)
        for summary_id, title, document_name, created_at, content in DEMO_SUMMARIES:
            await repo.save(
                Summary(
                    id=summary_id,
                    title=title,
                    content=content,
                    summary_type=SummaryType.STANDARD,
                    word_count=count_words(content),
                    document_name=document_name,
                    created_at=created_at,
                )
            )
        await session.commit()
        print(f"Seeded {len(DEMO_SUMMARIES)} demo summaries.")


asyncio.run(seed())
