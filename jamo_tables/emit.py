# jamo_tables/emit.py
# Serialize a built JamoTables set.
#   c      -> constexpr uint8_t arrays (+ optional out-of-line definitions)
#   python -> module with tuple constants
#   json   -> pydantic dump
from __future__ import annotations

from typing import Callable, Dict, List, Optional

from .builder import JamoTables

SENTINEL_NAME = "CI"
FORMATS = ("c", "python", "json")


def _c_array(name: str, values, sentinel: int) -> str:
    body = "".join(f"{SENTINEL_NAME if v == sentinel else v}," for v in values)
    return f"static constexpr uint8_t {name}[] = {{{body}}};"


def render_c(tables: JamoTables, linker_scope: Optional[str] = None) -> str:
    lines: List[str] = [f"#define {SENTINEL_NAME} UINT8_MAX"]
    for t in tables.categories:
        lines.append(_c_array(t.master_to_local_name(tables.prefix), t.master_to_local, tables.sentinel))
        lines.append(_c_array(t.local_to_master_name(tables.prefix), t.local_to_master, tables.sentinel))

    if linker_scope:
        lines.append("// to make the linker happy")
        for t in tables.categories:
            lines.append(f"constexpr uint8_t {linker_scope}::{t.master_to_local_name(tables.prefix)}[{len(tables.master)}];")
            lines.append(f"constexpr uint8_t {linker_scope}::{t.local_to_master_name(tables.prefix)}[{t.size}];")
    return "\n".join(lines) + "\n"


def _py_name(name: str) -> str:
    # _compToChoseong -> COMP_TO_CHOSEONG
    out = []
    for ch in name.lstrip("_"):
        if ch.isupper() and out:
            out.append("_")
        out.append(ch.upper())
    return "".join(out)


def render_python(tables: JamoTables) -> str:
    lines: List[str] = [
        "# automatically created by jamo_tables",
        f"SENTINEL = {tables.sentinel}",
        "",
        f"MASTER = {tables.master!r}",
    ]
    for t in tables.categories:
        for name, values in (
            (t.master_to_local_name(tables.prefix), t.master_to_local),
            (t.local_to_master_name(tables.prefix), t.local_to_master),
        ):
            items = ", ".join("SENTINEL" if v == tables.sentinel else str(v) for v in values)
            lines.append(f"{_py_name(name)} = ({items},)" if items else f"{_py_name(name)} = ()")
    return "\n".join(lines) + "\n"


def render_json(tables: JamoTables) -> str:
    return tables.model_dump_json(indent=2) + "\n"


_RENDERERS: Dict[str, Callable[..., str]] = {
    "c": render_c,
    "python": render_python,
    "json": render_json,
}


def render(tables: JamoTables, fmt: str = "c", linker_scope: Optional[str] = None) -> str:
    fn = _RENDERERS.get(fmt)
    if fn is None:
        raise ValueError(f"Unknown output format '{fmt}'. Choose one of: {', '.join(FORMATS)}")
    if fmt == "c":
        return fn(tables, linker_scope=linker_scope)
    return fn(tables)
