# core/report_analyzer.py
"""
Medical report analysis.

Flow:
  validate -> upload (returns URL) -> extract text (bounded retry)
  -> summarise with the language model (bounded retry)

Extraction and generation each get at most RETRY_ATTEMPTS tries with a fixed
delay in between. When extraction is exhausted the model is asked for
general guidance instead; when generation is exhausted the canned guidance
text is returned. The flow only raises for a rejected upload or a failed
upload write.
"""

import io
import logging
import time
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Callable, Optional, TypeVar
from urllib.parse import urlparse
from urllib.request import url2pathname

import httpx
import pdfplumber
from docx import Document

from core import settings
from core.ai_client import GenerationError
from core.models import Notice

logger = logging.getLogger(__name__)

T = TypeVar("T")

# ==================================================
# CONSTANTS
# ==================================================
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

ALLOWED_TYPES = {
    "application/pdf",
    "image/jpeg",
    "image/png",
    "image/jpg",
    DOCX_MIME,
    "text/plain",
}

IMAGE_SUFFIXES = {".jpg", ".jpeg", ".png"}

UPLOAD_SUBDIR = "medical-reports"

GENERAL_GUIDANCE = """**Key Hormones to Monitor:**
- Estrogen (E2) - affects mood, energy, and reproductive health
- Progesterone - important for cycle regulation and mood stability
- Testosterone - influences energy, libido, and muscle mass
- FSH & LH - indicate ovarian function and approaching menopause
- Thyroid hormones (TSH, T3, T4) - regulate metabolism and energy

**Pre-Menopause Signs to Watch For:**
- Irregular menstrual cycles
- Changes in flow (heavier or lighter)
- Mood swings or increased anxiety
- Sleep disturbances
- Hot flashes or night sweats
- Changes in libido

**Next Steps:**
1. Try uploading the file again in a different format (PDF works best)
2. Ensure the file is not password protected
3. Consider taking a clear photo of paper reports if needed
4. Consult with your healthcare provider about these hormone levels"""


# ==================================================
# ERRORS
# ==================================================
class UploadRejected(ValueError):
    """File refused before upload (type or size)."""

    def __init__(self, title: str, description: str):
        super().__init__(f"{title}: {description}")
        self.notice = Notice(title=title, description=description, variant="destructive")


class UploadStorageError(Exception):
    """The uploaded file could not be written to storage."""


class ExtractionError(Exception):
    """No text could be extracted from the document."""


# ==================================================
# VALIDATION
# ==================================================
def validate_upload(mime_type: str, size: int) -> None:
    if mime_type not in ALLOWED_TYPES:
        raise UploadRejected(
            "Invalid file type",
            "Please upload a PDF, JPG, PNG, DOCX, or TXT file.",
        )

    if size > settings.MAX_UPLOAD_BYTES:
        raise UploadRejected(
            "File too large",
            "Please upload a file smaller than 10MB.",
        )


# ==================================================
# UPLOAD
# ==================================================
class LocalUploadStorage:
    """
    Keeps uploads on disk and hands back a file:// URL.
    """

    def __init__(self, root: Path, clock: Callable[[], float] = time.time):
        self.root = Path(root)
        self.clock = clock

    def upload(self, data: bytes, file_name: str) -> str:
        safe_name = Path(file_name).name or "report"
        path = self.root / UPLOAD_SUBDIR / f"{int(self.clock() * 1000)}-{safe_name}"

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as exc:
            raise UploadStorageError(f"storage upload failed: {exc}") from exc

        logger.info("Uploaded %s (%d bytes)", path.name, len(data))
        return path.resolve().as_uri()


# ==================================================
# EXTRACTION
# ==================================================
class ReportTextExtractor:
    """
    Text from a stored document URL.
    PDF -> pdfplumber, DOCX -> python-docx, TXT -> utf-8.
    """

    def __init__(self, timeout: float = 30.0):
        self.timeout = timeout

    def _fetch(self, url: str) -> bytes:
        parsed = urlparse(url)

        if parsed.scheme == "file":
            try:
                return Path(url2pathname(parsed.path)).read_bytes()
            except OSError as exc:
                raise ExtractionError(f"Could not read {url}: {exc}") from exc

        if parsed.scheme in ("http", "https"):
            try:
                response = httpx.get(url, timeout=self.timeout, follow_redirects=True)
                response.raise_for_status()
            except httpx.HTTPError as exc:
                raise ExtractionError(f"network fetch failed for {url}: {exc}") from exc
            return response.content

        raise ExtractionError(f"Unsupported URL scheme: {parsed.scheme or 'none'}")

    def extract_from_url(self, url: str) -> str:
        data = self._fetch(url)
        suffix = PurePosixPath(urlparse(url).path).suffix.lower()

        if suffix in IMAGE_SUFFIXES:
            raise ExtractionError("Image documents need OCR, which is not available")

        if suffix == ".pdf":
            text = _pdf_text(data)
        elif suffix == ".docx":
            text = _docx_text(data)
        else:
            text = data.decode("utf-8", errors="replace")

        if not text.strip():
            raise ExtractionError(f"No text found in {suffix or 'document'}")
        return text


def _pdf_text(data: bytes) -> str:
    try:
        with pdfplumber.open(io.BytesIO(data)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as exc:
        raise ExtractionError(f"Could not open PDF: {exc}") from exc
    return "\n".join(pages)


def _docx_text(data: bytes) -> str:
    try:
        doc = Document(io.BytesIO(data))
    except Exception as exc:
        raise ExtractionError(f"Could not open DOCX: {exc}") from exc
    return "\n".join(p.text for p in doc.paragraphs)


# ==================================================
# RETRY
# ==================================================
def retry_call(
    fn: Callable[[], T],
    attempts: int = settings.RETRY_ATTEMPTS,
    delay: float = settings.RETRY_DELAY_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
    label: str = "call",
) -> T:
    """
    Run `fn` up to `attempts` times with a fixed delay between tries.
    Re-raises the last error once attempts are exhausted.
    """
    if attempts < 1:
        raise ValueError("attempts must be at least 1")

    last_error: Optional[Exception] = None

    for attempt in range(1, attempts + 1):
        try:
            logger.info("%s attempt %d/%d", label, attempt, attempts)
            return fn()
        except Exception as exc:
            last_error = exc
            logger.warning("%s attempt %d failed: %s", label, attempt, exc)
            if attempt < attempts:
                sleep(delay)

    raise last_error


# ==================================================
# PROMPTS
# ==================================================
def analysis_prompt(report_text: str) -> str:
    return (
        "Analyze this medical report and extract hormone-related information. "
        "Focus on:\n"
        "1. Hormone levels (estrogen, progesterone, testosterone, FSH, LH, etc.)\n"
        "2. Thyroid function (TSH, T3, T4)\n"
        "3. Any reproductive health indicators\n"
        "4. Recommendations for hormonal health\n"
        "5. Any signs of pre-menopause or hormonal imbalances\n\n"
        f"Medical report text:\n{report_text}\n\n"
        "Please provide a clear, easy-to-understand analysis in a friendly tone "
        "suitable for women aged 30-38."
    )


def fallback_prompt(file_name: str, mime_type: str, size: int) -> str:
    return (
        "I was unable to extract text from the uploaded medical report file "
        f"({file_name}).\n\n"
        "However, I can still provide you with general guidance about hormonal "
        "health tracking for women aged 30-38:\n\n"
        f"{GENERAL_GUIDANCE}\n\n"
        f"File details:\n- Name: {file_name}\n- Type: {mime_type}\n"
        f"- Size: {size / 1024 / 1024:.2f} MB\n\n"
        "Would you like to try uploading the file again or continue with daily "
        "symptom tracking?"
    )


def canned_analysis(file_name: str) -> str:
    return (
        f"We couldn't generate a personalised analysis for {file_name} right now.\n\n"
        "Here is some general guidance about hormonal health tracking "
        "for women aged 30-38:\n\n"
        f"{GENERAL_GUIDANCE}"
    )


# ==================================================
# PIPELINE
# ==================================================
@dataclass
class ReportAnalysis:
    file_name: str
    url: str
    text: str
    extraction_succeeded: bool
    generated: bool
    notice: Notice


def analyze_report(
    file_name: str,
    mime_type: str,
    data: bytes,
    *,
    uploader,
    extractor,
    generator=None,
    model: Optional[str] = None,
    attempts: int = settings.RETRY_ATTEMPTS,
    delay: float = settings.RETRY_DELAY_SECONDS,
    settle: float = settings.UPLOAD_SETTLE_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> ReportAnalysis:
    """
    Upload, extract and summarise a medical report.

    Raises UploadRejected for bad files and UploadStorageError when the
    upload itself fails. Extraction and generation failures degrade to
    fallback text.
    """
    validate_upload(mime_type, len(data))

    url = uploader.upload(data, file_name)
    sleep(settle)

    # ---------------- Extraction ----------------
    try:
        report_text = retry_call(
            lambda: extractor.extract_from_url(url),
            attempts=attempts,
            delay=delay,
            sleep=sleep,
            label="Extraction",
        )
        extraction_succeeded = True
    except Exception as exc:
        logger.warning("Text extraction failed, using fallback analysis: %s", exc)
        report_text = ""
        extraction_succeeded = False

    prompt = (
        analysis_prompt(report_text)
        if extraction_succeeded
        else fallback_prompt(file_name, mime_type, len(data))
    )

    # ---------------- Generation ----------------
    generated = False
    if generator is None:
        text = canned_analysis(file_name)
    else:
        chosen_model = model or settings.get_model()
        try:
            text = retry_call(
                lambda: generator.generate(prompt, chosen_model),
                attempts=attempts,
                delay=delay,
                sleep=sleep,
                label="Generation",
            )
            generated = True
        except Exception as exc:
            logger.error("AI generate failed after %d attempts: %s", attempts, exc)
            text = canned_analysis(file_name)

    if extraction_succeeded:
        notice = Notice(
            title="Analysis complete!",
            description="Your medical report has been analyzed successfully.",
        )
    else:
        notice = Notice(
            title="Analysis complete (with limitations)",
            description=(
                "We provided general guidance since text extraction had issues. "
                "Try re-uploading if needed."
            ),
        )

    return ReportAnalysis(
        file_name=file_name,
        url=url,
        text=text,
        extraction_succeeded=extraction_succeeded,
        generated=generated,
        notice=notice,
    )


def describe_failure(exc: Exception) -> Notice:
    """
    User-facing notice for an unexpected upload-flow error.
    """
    message = str(exc)
    lowered = message.lower()

    description = "There was an error processing your file. Please try again."
    if isinstance(exc, httpx.TransportError) or "network" in lowered or "fetch" in lowered:
        description = "Network error. Please check your connection and try again."
    elif isinstance(exc, UploadStorageError) or "storage" in lowered:
        description = "File upload failed. Please try a smaller file or different format."
    elif isinstance(exc, GenerationError) or "AI" in message or "generate" in lowered:
        description = "AI analysis failed. Please try again in a moment."

    return Notice(title="Upload failed", description=description, variant="destructive")
