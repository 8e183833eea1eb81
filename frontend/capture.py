# frontend/capture.py

import base64
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

READ_FAILED_MESSAGE = "Failed to read file."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."
MAX_ADVERTISED_MB = 5


class FileReadError(Exception):
    pass


@dataclass(frozen=True)
class UploadedFile:
    data: bytes
    mime_type: str
    name: str

    @classmethod
    def from_upload(cls, uploaded) -> "UploadedFile":
        """Build from a Streamlit UploadedFile (or anything with name/type/getvalue)."""
        try:
            data = uploaded.getvalue()
        except (OSError, ValueError):
            raise FileReadError(READ_FAILED_MESSAGE)
        return cls(
            data=data,
            mime_type=uploaded.type or "application/octet-stream",
            name=uploaded.name,
        )

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def size_label(self) -> str:
        return f"{self.size / 1024 / 1024:.2f} MB"

    @property
    def is_image(self) -> bool:
        return self.mime_type.startswith("image/")

    def to_data_uri(self) -> str:
        try:
            b64 = base64.b64encode(self.data).decode("ascii")
        except (TypeError, ValueError):
            raise FileReadError(READ_FAILED_MESSAGE)
        return f"data:{self.mime_type};base64,{b64}"


@dataclass
class AnalysisOutcome:
    data: Optional[Dict[str, Any]] = None
    error: Optional[str] = None


# (file_data_uri, file_name) -> outcome
Analyzer = Callable[[str, str], AnalysisOutcome]


@dataclass
class CaptureState:
    """
    Everything the upload page knows about the current attempt.

    One live file at a time. `busy` is the in-flight marker: it is set by
    begin() (the submit button's click callback), kept while the analysis
    runs, and cleared by complete().
    """

    file: Optional[UploadedFile] = None
    preview_url: Optional[str] = None
    data_uri: Optional[str] = None
    result: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    busy: bool = False
    picker_nonce: int = 0

    @property
    def picker_key(self) -> str:
        return f"file-picker-{self.picker_nonce}"

    def select(self, file: UploadedFile) -> None:
        self.file = file
        self.result = None
        self.error = None
        self.preview_url = None
        self.data_uri = None

        if file.is_image:
            try:
                self.preview_url = file.to_data_uri()
            except FileReadError as e:
                self.error = str(e)

    def reset(self) -> None:
        self.file = None
        self.preview_url = None
        self.data_uri = None
        self.result = None
        self.error = None
        self.busy = False
        # A fresh widget key empties the picker so the same file can be chosen again.
        self.picker_nonce += 1

    def begin(self) -> bool:
        """Mark a submission in flight. Ignored (False) while one already is."""
        if self.busy or self.file is None:
            return False
        self.busy = True
        self.error = None
        self.result = None
        return True

    def complete(self, analyzer: Analyzer) -> bool:
        """
        Run the analysis for a submission started with begin().

        Returns True when a result is stored. busy is always cleared.
        """
        if not self.busy or self.file is None:
            return False
        try:
            try:
                self.data_uri = self.file.to_data_uri()
            except FileReadError as e:
                self.error = str(e)
                return False

            outcome = analyzer(self.data_uri, self.file.name)
            if outcome.error or outcome.data is None:
                self.error = outcome.error or UNEXPECTED_ERROR_MESSAGE
                return False
            self.result = outcome.data
            return True
        finally:
            self.busy = False

    def submit(self, analyzer: Analyzer) -> bool:
        return self.begin() and self.complete(analyzer)
