# api/main.py
"""
FastAPI backend for CiviCalc - exposes the beam engine as a REST API.
"""

import logging
from typing import Dict, List, Literal, Optional, Tuple

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field

from civicalc.analysis import AnalysisResult, analyze
from civicalc.catalog import MATERIALS, get_material
from civicalc.config import CONFIG
from civicalc.export import result_to_csv, summary_rows
from civicalc.model import Beam, Load
from civicalc.section import calculate_section_properties

logger = logging.getLogger(__name__)


app = FastAPI(
    title="CiviCalc API",
    description="Beam analysis engine: reactions, shear, moment and deflection",
    version=CONFIG.version,
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000",
                   "http://localhost:5173", "http://127.0.0.1:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Request/Response Models
# =============================================================================

BoundaryConditionName = Literal[
    "simply_supported", "cantilever", "overhanging", "fixed_both", "propped_cantilever"
]


class LoadData(BaseModel):
    """One applied load."""
    type: Literal["point", "udl", "moment"] = Field("point", description="Load kind")
    magnitude: float = Field(0.0, description="kN, kN/m or kN·m (positive = down)")
    position: float = Field(0.0, description="Point / moment location (m)")
    start: float = Field(0.0, description="UDL start (m)")
    end: Optional[float] = Field(None, description="UDL end (m), defaults to the span")


class BeamParams(BaseModel):
    """Input parameters for a beam analysis."""
    span: float = Field(6.0, gt=0, description="Span (m)")
    E: float = Field(CONFIG.default_E, gt=0, description="Elastic modulus (Pa)")
    I: float = Field(CONFIG.default_I, gt=0, description="Second moment of area (m⁴)")
    material: Optional[str] = Field(None, description="Material name; overrides E")
    segments: int = Field(CONFIG.default_segments, ge=1, le=10000, description="Discretization segments")
    boundary_condition: BoundaryConditionName = "simply_supported"
    supports: Optional[Tuple[float, float]] = Field(None, description="Support positions (overhanging)")
    loads: List[LoadData] = Field(default_factory=list)


class ReactionsData(BaseModel):
    Ra: float
    Rb: float
    Ma: float
    Mb: float


class MaxValuesData(BaseModel):
    shear: float
    shearPosition: float
    moment: float
    momentPosition: float
    deflection: float
    deflectionPosition: float


class PropertiesData(BaseModel):
    span: float
    E: float
    I: float
    EI: float
    boundaryCondition: str


class SummaryLine(BaseModel):
    label: str
    value: float
    unit: str


class AnalysisResponse(BaseModel):
    """Complete analysis result."""
    x: List[float]
    shear: List[float]
    moment: List[float]
    deflection: List[float]
    reactions: ReactionsData
    maxValues: MaxValuesData
    properties: PropertiesData
    summary: List[SummaryLine]


class SectionParams(BaseModel):
    """Cross-section shape and dimensions (m)."""
    shape: Literal["rectangle", "circle", "i_beam"] = "rectangle"
    dimensions: Dict[str, float] = Field(default_factory=dict)


class SectionData(BaseModel):
    area: float
    moment_of_inertia: float
    section_modulus: float
    y_max: float


# =============================================================================
# Analysis
# =============================================================================

def build_beam(params: BeamParams) -> Beam:
    """Translate request parameters into a Beam."""
    E = get_material(params.material).E if params.material else params.E
    loads = tuple(
        Load(kind=ld.type, magnitude=ld.magnitude, position=ld.position,
             start=ld.start, end=ld.end)
        for ld in params.loads
    )
    return Beam(
        span=params.span,
        E=E,
        I=params.I,
        segments=params.segments,
        boundary_condition=params.boundary_condition,
        supports=params.supports,
        loads=loads,
    )


def run_analysis(params: BeamParams) -> AnalysisResult:
    try:
        return analyze(build_beam(params))
    except ValueError as e:
        logger.info("Rejected beam request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "CiviCalc API"}


@app.post("/api/beam/analyze", response_model=AnalysisResponse)
async def analyze_endpoint(params: BeamParams):
    """Analyze a beam and return diagrams, reactions and maxima."""
    result = run_analysis(params)
    payload = result.to_dict()
    payload["summary"] = [
        {"label": label, "value": value, "unit": unit}
        for label, value, unit in summary_rows(result)
    ]
    return payload


@app.post("/api/beam/export/csv")
async def export_csv(params: BeamParams):
    """Export the diagram table as CSV."""
    result = run_analysis(params)
    return StreamingResponse(
        iter([result_to_csv(result)]),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=beam_analysis.csv"}
    )


@app.post("/api/section", response_model=SectionData)
async def section_properties(params: SectionParams):
    """Area, I, section modulus and extreme-fibre distance of a section."""
    try:
        props = calculate_section_properties(params.shape, **params.dimensions)
    except (TypeError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    return SectionData(
        area=props.area,
        moment_of_inertia=props.moment_of_inertia,
        section_modulus=props.section_modulus,
        y_max=props.y_max,
    )


@app.get("/api/materials")
async def materials():
    """Available material presets."""
    return [{"key": key, "name": m.name, "E": m.E} for key, m in MATERIALS.items()]


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
