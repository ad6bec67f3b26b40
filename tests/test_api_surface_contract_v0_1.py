"""
MIT License
Copyright (c) 2025 DarekDGB
"""

from __future__ import annotations

import importlib
import inspect
import json
from pathlib import Path

import pytest

import ppqr


def _load_contract() -> dict:
    p = Path(__file__).resolve().parents[1] / "contracts" / "api_surface_v0_1.json"
    return json.loads(p.read_text(encoding="utf-8"))


def _contracted_imports() -> set[str]:
    return {entry["import"] for entry in _load_contract()["public_functions"]}


def _resolve(spec: str):
    """
    spec format: "ppqr.module:attr_name"
    """
    mod_name, sep, attr = spec.partition(":")
    if not sep or not mod_name.startswith("ppqr."):
        raise ValueError(f"Invalid import spec: {spec!r}")
    return getattr(importlib.import_module(mod_name), attr)


@pytest.mark.parametrize("entry", _load_contract()["public_functions"], ids=lambda e: e["import"])
def test_contracted_signature_is_unchanged(entry: dict) -> None:
    obj = _resolve(entry["import"])
    assert inspect.isfunction(obj), f"{entry['import']} must be a plain function"

    params = list(inspect.signature(obj).parameters.values())
    pos = [p.name for p in params if p.kind == inspect.Parameter.POSITIONAL_OR_KEYWORD]
    kwonly = [p.name for p in params if p.kind == inspect.Parameter.KEYWORD_ONLY]

    assert pos == entry["args"], f"{entry['import']} args changed: {pos}"
    assert kwonly == entry.get("kwonly", [])


def test_contract_covers_every_pipeline_stage() -> None:
    c = _load_contract()
    assert c["version"] == "v0.1"
    modules = {spec.split(":", 1)[0] for spec in _contracted_imports()}
    assert modules == {
        "ppqr.payload",
        "ppqr.identifiers",
        "ppqr.amount",
        "ppqr.crc",
        "ppqr.tlv",
    }


def test_package_exports_match_contract() -> None:
    contracted = _contracted_imports()
    exported_functions = [
        getattr(ppqr, name) for name in ppqr.__all__ if inspect.isfunction(getattr(ppqr, name))
    ]
    assert exported_functions, "ppqr must export the payload functions"
    for fn in exported_functions:
        assert f"{fn.__module__}:{fn.__name__}" in contracted


def test_package_exports_error_kinds() -> None:
    kinds = {
        getattr(ppqr, name).kind
        for name in ppqr.__all__
        if inspect.isclass(getattr(ppqr, name)) and issubclass(getattr(ppqr, name), ppqr.PromptPayError)
    }
    assert kinds == {"PromptPayError", "InvalidIdentifierFormat", "InvalidAmount", "InvalidPayload"}
