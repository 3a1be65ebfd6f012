"""Domain exceptions for conversion and CLI diagnostics."""

from __future__ import annotations


class PipelineStageError(RuntimeError):
    """Raised when a specific conversion stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped conversion error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class NoChaptersDetectedError(PipelineStageError):
    """Raised when segmentation yields no chapters at all."""

    def __init__(self) -> None:
        super().__init__(
            stage="segment",
            detail="No chapters detected.",
            hint="Check that the source text is not empty or whitespace-only.",
        )
