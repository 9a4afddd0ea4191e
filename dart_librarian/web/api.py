"""FastAPI routes that plan export edits for editor integrations.

Every endpoint is stateless: clients send the document text and receive
the edit plan, which they apply and save themselves.
"""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from dart_librarian.editor import (
    add_export,
    apply_edits,
    export_statement_for,
    remove_export,
)
from dart_librarian.locator import locate_lib_root
from dart_librarian.scanner import scan_export_candidates

router = APIRouter(prefix="/api")


# --- Request / Response models ---

class LibRootRequest(BaseModel):
    path: str

class ScanRequest(BaseModel):
    lib_root: str
    recursive: bool = False
    exclude_private: bool = True

class StatementRequest(BaseModel):
    library_file: str
    target_file: str

class PlanRequest(BaseModel):
    text: str
    statement: str
    apply: bool = False


class EditModel(BaseModel):
    start_line: int
    end_line: int
    replacement: str


def _validate_statement(statement: str) -> str:
    statement = statement.strip()
    if not statement.startswith("export '") or not statement.endswith("';"):
        raise HTTPException(400, f"Not an export statement: {statement!r}")
    return statement


# --- Endpoints ---

@router.post("/lib-root")
def lib_root(req: LibRootRequest):
    root = locate_lib_root(req.path)
    return {"lib_root": str(root) if root is not None else None}


@router.post("/scan")
def scan(req: ScanRequest):
    directory = Path(req.lib_root).expanduser()
    if not directory.exists():
        raise HTTPException(404, f"Path not found: {directory}")
    if not directory.is_dir():
        raise HTTPException(400, "Path must be a directory")

    candidates = scan_export_candidates(
        directory, recursive=req.recursive, exclude_private=req.exclude_private,
    )
    return {
        "count": len(candidates),
        "candidates": [
            {
                "path": str(c.path),
                "relative_path": c.relative_path,
                "has_library": c.has_library,
            }
            for c in candidates
        ],
    }


@router.post("/statement")
def statement(req: StatementRequest):
    return {"statement": export_statement_for(req.library_file, req.target_file)}


@router.post("/plan/add")
def plan_add(req: PlanRequest):
    plan = add_export(req.text, _validate_statement(req.statement))
    response = {
        "edits": [EditModel(**e.to_dict()) for e in plan.edits],
        "duplicate": plan.duplicate,
        "line": plan.line,
    }
    if req.apply:
        response["text"] = apply_edits(req.text, plan.edits)
    return response


@router.post("/plan/remove")
def plan_remove(req: PlanRequest):
    plan = remove_export(req.text, _validate_statement(req.statement))
    response = {
        "edits": [EditModel(**e.to_dict()) for e in plan.edits],
        "not_found": plan.not_found,
    }
    if req.apply:
        response["text"] = apply_edits(req.text, plan.edits)
    return response
