from typing import Any

from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from app.database.connection import get_connection
from app.database.exceptions import AnalysisNotFoundError
from app.database.models import AnalysisRecord, AnalysisSummary
from app.database.validator import build_glossary, build_sections
from app.processor.models import AnalysisStatus, Glossary, Section


class AnalysisRepository:
    """Database operations for the analyses table.

    Every read and delete is scoped by ``user_id``; a record owned by
    someone else is indistinguishable from a missing one.
    """

    def create(
        self,
        *,
        user_id: str,
        filename: str,
        mime_type: str,
        output_lang: str,
    ) -> str:
        """Insert a new analysis in 'processing' state and return its id."""
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    INSERT INTO analyses (user_id, filename, mime_type, output_lang, status)
                    VALUES (%s, %s, %s, %s, %s)
                    RETURNING id
                    """,
                    (user_id, filename, mime_type, output_lang, AnalysisStatus.PROCESSING.value),
                )
                row = cur.fetchone()
            conn.commit()

        if row is None:
            raise RuntimeError("INSERT INTO analyses returned no id")
        return str(row[0])

    def complete(
        self,
        analysis_id: str,
        *,
        input_lang: str,
        sections: list[Section],
        glossary: Glossary,
    ) -> None:
        """Store the pipeline result and mark the analysis completed.

        Raises:
            AnalysisNotFoundError: if no analysis with this ID exists.
        """
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    UPDATE analyses
                    SET input_lang = %s,
                        sections = %s,
                        glossary = %s,
                        status = %s,
                        error_message = NULL,
                        updated_at = NOW()
                    WHERE id = %s
                    """,
                    (
                        input_lang,
                        Jsonb([section.to_dict() for section in sections]),
                        Jsonb(glossary),
                        AnalysisStatus.COMPLETED.value,
                        analysis_id,
                    ),
                )
                if cur.rowcount == 0:
                    raise AnalysisNotFoundError(f"Analysis {analysis_id} not found")
            conn.commit()

    def mark_failed(
        self,
        analysis_id: str,
        error: str,
        *,
        input_lang: str | None = None,
    ) -> None:
        """Mark an analysis as failed, keeping the detected language if known."""
        with get_connection() as conn:
            conn.execute(
                """
                UPDATE analyses
                SET status = %s,
                    error_message = %s,
                    input_lang = COALESCE(%s, input_lang),
                    updated_at = NOW()
                WHERE id = %s
                """,
                (AnalysisStatus.FAILED.value, error, input_lang, analysis_id),
            )
            conn.commit()

    def find_for_user(self, analysis_id: str, user_id: str) -> AnalysisRecord | None:
        """Return the full analysis if it exists and belongs to ``user_id``."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, user_id, filename, mime_type, input_lang, output_lang,
                           sections, glossary, status, error_message,
                           created_at, updated_at
                    FROM analyses
                    WHERE id = %s AND user_id = %s
                    """,
                    (analysis_id, user_id),
                )
                row = cur.fetchone()

        if row is None:
            return None
        return self._to_record(row)

    def list_for_user(self, user_id: str, *, limit: int, offset: int = 0) -> list[AnalysisSummary]:
        """Return one page of the user's analyses, newest first."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, filename, mime_type, status, input_lang, output_lang,
                           jsonb_array_length(sections) AS section_count,
                           (SELECT COUNT(*) FROM jsonb_object_keys(glossary)) AS glossary_size,
                           created_at
                    FROM analyses
                    WHERE user_id = %s
                    ORDER BY created_at DESC, id DESC
                    LIMIT %s OFFSET %s
                    """,
                    (user_id, limit, offset),
                )
                rows = cur.fetchall()

        return [
            AnalysisSummary(
                id=str(row["id"]),
                filename=row["filename"],
                mime_type=row["mime_type"],
                status=row["status"],
                input_lang=row["input_lang"],
                output_lang=row["output_lang"],
                section_count=int(row["section_count"] or 0),
                glossary_size=int(row["glossary_size"] or 0),
                created_at=row["created_at"],
            )
            for row in rows
        ]

    def count_for_user(self, user_id: str) -> int:
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT COUNT(*) FROM analyses WHERE user_id = %s", (user_id,))
                row = cur.fetchone()
        return int(row[0]) if row is not None else 0

    def delete_for_user(self, analysis_id: str, user_id: str) -> bool:
        """Delete the user's analysis. Returns False if nothing was deleted."""
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    "DELETE FROM analyses WHERE id = %s AND user_id = %s",
                    (analysis_id, user_id),
                )
                deleted = cur.rowcount > 0
            conn.commit()
        return deleted

    @staticmethod
    def _to_record(row: dict[str, Any]) -> AnalysisRecord:
        analysis_id = str(row["id"])
        return AnalysisRecord(
            id=analysis_id,
            user_id=row["user_id"],
            filename=row["filename"],
            mime_type=row["mime_type"],
            input_lang=row["input_lang"],
            output_lang=row["output_lang"],
            status=row["status"],
            sections=build_sections(row["sections"], analysis_id),
            glossary=build_glossary(row["glossary"], analysis_id),
            error_message=row["error_message"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
