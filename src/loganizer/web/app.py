import logging
from functools import lru_cache
from typing import Any, Dict, List

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from ..core.analyzer import LogAnalyzer
from ..core.records import LogConfig
from ..core.reporter import summarize
from ..utils.config import Config
from ..utils.constants import GENERIC_MESSAGE_TEMPLATE, MESSAGE_TEMPLATES
from ..utils.logging_utils import log_duration

logger = logging.getLogger(__name__)

app = FastAPI(title="Loganizer API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ResultModel(BaseModel):
    log_id: str
    file_path: str
    status: str
    message: str
    error_details: str
    process_time: str


class AnalysisResponse(BaseModel):
    results: List[ResultModel]
    summary: Dict[str, Any]


@lru_cache()
def get_analyzer() -> LogAnalyzer:
    """Analyzer shared by all requests, built from environment settings"""
    analyzer = LogAnalyzer.from_config(Config())
    logger.info(f"Created analyzer with {analyzer.random_source!r}")
    return analyzer


@app.post("/analyze", response_model=AnalysisResponse)
def analyze_logs(
    configs: List[LogConfig],
    analyzer: LogAnalyzer = Depends(get_analyzer),
):
    """Analyze the posted log configurations and return every result"""
    with log_duration(logger, f"Analyzed {len(configs)} log files in {{duration}}"):
        results = analyzer.analyze_all(configs)

    return {
        "results": [result.to_dict() for result in results],
        "summary": summarize(results),
    }


@app.get("/log-types")
async def list_log_types():
    """List log types with dedicated analysis messages"""
    return {
        "types": {
            log_type: template.format(count="N")
            for log_type, template in MESSAGE_TEMPLATES.items()
        },
        "default": GENERIC_MESSAGE_TEMPLATE.format(count="N"),
    }


@app.get("/health")
async def health():
    return {"status": "ok"}


def start(host: str = "0.0.0.0", port: int = 8000) -> None:
    """Run the API server"""
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    start()
