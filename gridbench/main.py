from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from . import __version__
from .algorithms.loader import REGISTRY, Strategy, list_algorithms
from .algorithms.types import Grid, NeighborModel
from .benchmark import SearchResult, run_benchmark, run_strategy
from .config import DEFAULT_MAX_VISITED, DEFAULT_PARALLEL, DEFAULT_TIMEOUT_S, LOG_LEVEL
from .errors import GridBenchError

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Grid Pathfinding Benchmark", version=__version__)

# Results are consumed by a separate visualization frontend.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class AlgorithmInfo(BaseModel):
    id: str
    name: str
    description: str = ""


class GridModel(BaseModel):
    rows: int = Field(gt=0)
    cols: int = Field(gt=0)
    # Row-major flags, 1 = blocked.
    blocked: List[int]


class RunOptionsModel(BaseModel):
    neighbor_model: NeighborModel = NeighborModel.FOUR
    timeout_s: Optional[float] = Field(default=DEFAULT_TIMEOUT_S, gt=0)
    return_visited: bool = False
    max_visited: int = Field(default=DEFAULT_MAX_VISITED, ge=0)


class RunRequestModel(BaseModel):
    algorithm_id: str
    grid: GridModel
    start: Tuple[int, int]
    goal: Tuple[int, int]
    options: Optional[RunOptionsModel] = None


class BenchmarkRequestModel(BaseModel):
    grid: GridModel
    start: Tuple[int, int]
    goal: Tuple[int, int]
    neighbor_model: NeighborModel = NeighborModel.FOUR
    timeout_s: Optional[float] = Field(default=DEFAULT_TIMEOUT_S, gt=0)
    strategies: Optional[List[Strategy]] = None
    parallel: bool = DEFAULT_PARALLEL
    return_visited: bool = False


class SearchResultModel(BaseModel):
    strategy: str
    name: str
    outcome: str
    path: Optional[List[List[int]]]
    path_length: Optional[int]
    nodes_visited: int
    elapsed_s: float
    runtime_ms: float
    peak_memory: int
    error: Optional[str] = None
    visited: List[List[int]] = []


class ReportModel(BaseModel):
    results: Dict[str, SearchResultModel]


def _build_grid(g: GridModel) -> Grid:
    n = g.rows * g.cols
    if len(g.blocked) != n:
        raise HTTPException(status_code=400, detail=f"blocked length {len(g.blocked)} != rows*cols {n}")
    return Grid(g.rows, g.cols, tuple(bool(x) for x in g.blocked))


def _to_model(result: SearchResult) -> SearchResultModel:
    return SearchResultModel(**result.to_dict())


@app.get("/api/health")
def health():
    return {"ok": True, "algorithms": len(REGISTRY)}


@app.get("/api/algorithms", response_model=list[AlgorithmInfo])
def algorithms() -> list[AlgorithmInfo]:
    out: list[AlgorithmInfo] = []
    for spec in list_algorithms(REGISTRY):
        out.append(AlgorithmInfo(id=spec.id, name=spec.name, description=spec.description))
    return out


@app.post("/api/run", response_model=SearchResultModel)
def run(req: RunRequestModel) -> SearchResultModel:
    try:
        strategy = Strategy(req.algorithm_id)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown algorithm_id: {req.algorithm_id}")

    grid = _build_grid(req.grid)
    opts = req.options or RunOptionsModel()
    try:
        result = run_strategy(
            strategy,
            grid,
            req.start,
            req.goal,
            opts.neighbor_model,
            opts.timeout_s,
            return_visited=opts.return_visited,
            max_visited=opts.max_visited,
        )
    except (GridBenchError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    return _to_model(result)


@app.post("/api/benchmark", response_model=ReportModel)
def benchmark(req: BenchmarkRequestModel) -> ReportModel:
    grid = _build_grid(req.grid)
    try:
        report = run_benchmark(
            grid,
            req.start,
            req.goal,
            req.neighbor_model,
            req.timeout_s,
            strategies=req.strategies,
            parallel=req.parallel,
            return_visited=req.return_visited,
        )
    except (GridBenchError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ReportModel(results={s.value: _to_model(r) for s, r in report.items()})
