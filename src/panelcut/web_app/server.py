"""FastAPI 백엔드 서버 - Panelcut 웹 API"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from ..models import Objective, OptimizationConfig, PieceSpec
from ..optimizer import optimize

app = FastAPI(title="Panelcut - 판재 재단 최적화")

# CORS 설정 (개발 환경용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class PieceInput(BaseModel):
    """조각 입력 모델"""
    id: str
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    quantity: int = Field(default=1, ge=1)


class CuttingRequest(BaseModel):
    """재단 요청 모델"""
    board_width: int = Field(default=2800, gt=0)
    board_height: int = Field(default=2070, gt=0)
    kerf: int = Field(default=3, ge=0)
    allow_rotation: bool = True
    force_two_columns: bool = False
    objective: Objective = Objective.BALANCED
    use_advanced_optimizer: bool = False
    random_seed: int = 42
    pieces: list[PieceInput]

    def to_config(self) -> OptimizationConfig:
        return OptimizationConfig(
            board_width=self.board_width,
            board_height=self.board_height,
            kerf=self.kerf,
            allow_rotation=self.allow_rotation,
            force_two_columns=self.force_two_columns,
            objective=self.objective,
            use_advanced_optimizer=self.use_advanced_optimizer,
            random_seed=self.random_seed,
        )

    def to_specs(self) -> list[PieceSpec]:
        return [PieceSpec(p.id, p.width, p.height, p.quantity) for p in self.pieces]


class CuttingResponse(BaseModel):
    """재단 응답 모델"""
    success: bool
    total_pieces: int
    placed_pieces: int
    boards_used: int
    cut_count: int
    utilization: float
    strategy: str | None
    boards: list[dict]
    pieces: list[dict]
    cuts: list[dict]
    unplaced: list[dict]
    heuristics: list[dict]


@app.get("/")
async def read_root():
    """루트 경로 - API 안내"""
    return {"name": "panelcut", "endpoint": "/api/optimize"}


@app.get("/api/health")
async def health():
    return {"status": "ok"}


@app.post("/api/optimize", response_model=CuttingResponse)
def calculate_cutting(request: CuttingRequest):
    """재단 계획 계산 API

    원판에 들어가지 않는 조각은 오류가 아니라 unplaced 목록으로 반환된다.
    동기 함수로 선언해 이벤트 루프가 아닌 스레드풀에서 실행한다.
    """
    specs = request.to_specs()
    result = optimize(request.to_config(), specs)
    data = result.to_dict()

    return CuttingResponse(
        success=not result.unplaced,
        total_pieces=sum(spec.quantity for spec in specs),
        placed_pieces=result.piece_count,
        boards_used=result.board_count,
        cut_count=result.cut_count,
        utilization=result.utilization,
        strategy=result.strategy,
        boards=data['boards'],
        pieces=data['pieces'],
        cuts=data['cuts'],
        unplaced=data['unplaced'],
        heuristics=data['heuristics'],
    )
