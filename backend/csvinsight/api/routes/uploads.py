"""CSV upload and profiling routes."""
import logging

from fastapi import APIRouter, File, HTTPException, UploadFile

from csvinsight.core.config import settings
from csvinsight.ingestion.profiler import ColumnProfiler

logger = logging.getLogger(__name__)

router = APIRouter()
profiler = ColumnProfiler()


def _is_csv(file: UploadFile) -> bool:
    filename = (file.filename or "").lower()
    return filename.endswith(".csv") or file.content_type == "text/csv"


@router.post("/upload")
def upload_csv(csv_file: UploadFile = File(..., alias="csvFile")):
    """Profile an uploaded CSV file. The file is not stored."""
    if not _is_csv(csv_file):
        raise HTTPException(status_code=400, detail="File must be a CSV")
    
    raw = csv_file.file.read(settings.MAX_UPLOAD_BYTES + 1)
    if len(raw) > settings.MAX_UPLOAD_BYTES:
        raise HTTPException(
            status_code=413,
            detail=f"File exceeds the {settings.MAX_UPLOAD_BYTES} byte upload limit"
        )
    
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="File must be UTF-8 encoded text")
    
    logger.info("Processing CSV file: %s (%d bytes)", csv_file.filename, len(raw))
    
    try:
        aggregates = profiler.profile_text(text)
    except Exception:
        logger.exception("Error processing CSV: %s", csv_file.filename)
        raise HTTPException(status_code=500, detail="Failed to process CSV file")
    
    logger.info(
        "Profiled %s: %d rows, %d columns",
        csv_file.filename, aggregates.row_count, len(aggregates.headers)
    )
    
    return {
        "success": True,
        "fileName": csv_file.filename,
        "aggregates": aggregates.to_contract(),
    }
