# civicalc/export.py
"""
Tabular exports of an AnalysisResult for reports and downloads.

- result_to_dataframe: one row per node (x, V, M, deflection)
- result_to_csv:       the same table as CSV text
- summary_rows:        (label, value, unit) lines for a printed report
"""

from typing import List, Tuple

import pandas as pd

from .analysis import AnalysisResult

DIAGRAM_COLUMNS = ["x_m", "shear_kN", "moment_kNm", "deflection_mm"]


def result_to_dataframe(result: AnalysisResult) -> pd.DataFrame:
    """Node-by-node diagram table."""
    return pd.DataFrame({
        "x_m": result.x,
        "shear_kN": result.shear,
        "moment_kNm": result.moment,
        "deflection_mm": result.deflection,
    }, columns=DIAGRAM_COLUMNS)


def result_to_csv(result: AnalysisResult, decimals: int = 6) -> str:
    """CSV text of the diagram table, values rounded to ``decimals``."""
    return result_to_dataframe(result).round(decimals).to_csv(index=False)


def summary_rows(result: AnalysisResult) -> List[Tuple[str, float, str]]:
    """Key results in report order."""
    r = result.reactions
    mv = result.max_values
    rows = [
        ("Reaction at A (Ra)", r.Ra, "kN"),
        ("Reaction at B (Rb)", r.Rb, "kN"),
    ]
    if r.Ma != 0.0:
        rows.append(("Moment at A (Ma)", r.Ma, "kN·m"))
    if r.Mb != 0.0:
        rows.append(("Moment at B (Mb)", r.Mb, "kN·m"))
    rows += [
        ("Max Shear Force", mv.shear, "kN"),
        ("Position of Max Shear", mv.shear_position, "m"),
        ("Max Bending Moment", mv.moment, "kN·m"),
        ("Position of Max Moment", mv.moment_position, "m"),
        ("Max Deflection", mv.deflection, "mm"),
        ("Position of Max Deflection", mv.deflection_position, "m"),
    ]
    return rows
