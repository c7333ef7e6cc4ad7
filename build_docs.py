"""Build docs/index.html for GitHub Pages (PyScript / Pyodide).

Extracts the core generator and checklist from passgen/__init__.py via the
ast module, wraps them in a PyScript-powered form page, and writes to docs/.

Usage:
    python build_docs.py
"""

import ast
from pathlib import Path

ROOT = Path(__file__).parent
SRC = ROOT / "passgen" / "__init__.py"
OUT = ROOT / "docs" / "index.html"

PYSCRIPT_VERSION = "2024.9.2"

# Top-level definitions copied into the page, in dependency order.
CORE_NAMES = [
    "CharacterClass",
    "UPPERCASE",
    "LOWERCASE",
    "DIGITS",
    "SYMBOLS",
    "CHARACTER_CLASSES",
    "ALPHABET",
    "SPECIAL_CHARACTERS",
    "GenerationConfig",
    "generate_password",
    "_contains_any",
    "Requirement",
    "REQUIREMENTS",
    "MAX_SCORE",
    "_LABELS",
    "_TIERS",
    "strength_label",
    "strength_tier",
    "RequirementStatus",
    "StrengthResult",
    "evaluate_strength",
]


# ── AST extraction ────────────────────────────────────────────────────────


def _extract(source: str, tree: ast.Module, name: str) -> str:
    """Return the source text of a top-level class, function or assignment."""
    for node in ast.iter_child_nodes(tree):
        if isinstance(node, (ast.FunctionDef, ast.ClassDef)) and node.name == name:
            return ast.get_source_segment(source, node)
        if isinstance(node, ast.Assign):
            for target in node.targets:
                if isinstance(target, ast.Name) and target.id == name:
                    return ast.get_source_segment(source, node)
    raise ValueError(f"{name!r} not found in source")


_PY_IMPORTS = """\
import secrets
from typing import Callable, NamedTuple, Sequence
"""


def core_source(src: Path = SRC) -> str:
    """Return the self-contained core code that runs inside the page."""
    source = src.read_text(encoding="utf-8")
    tree = ast.parse(source)
    parts = [_extract(source, tree, name) for name in CORE_NAMES]
    return (
        _PY_IMPORTS
        + "\n# ── Core logic (extracted from passgen/__init__.py) ──\n\n"
        + "\n\n".join(parts)
        + "\n"
    )


# ── Python code that runs inside PyScript ─────────────────────────────────

_PY_BROWSER = r'''
import asyncio

from pyscript import when, document
from js import navigator

MASK_CHAR = "•"
TIER_COLORS = {
    "neutral": "#3f3f46",
    "critical": "#ef4444",
    "caution": "#f97316",
    "good": "#f59e0b",
    "excellent": "#10b981",
}

state = {"password": "", "visible": False}


def render():
    """Redraw the password field, meter and checklist from state."""
    pwd = state["password"]
    field = document.querySelector("#password")
    field.value = pwd if state["visible"] else MASK_CHAR * len(pwd)
    document.querySelector("#toggleVis").textContent = (
        "HIDE" if state["visible"] else "SHOW"
    )

    result = evaluate_strength(pwd)
    bar = document.querySelector("#strengthBar")
    bar.style.width = f"{result.percent:.0f}%"
    bar.style.background = TIER_COLORS[result.tier]
    document.querySelector("#strengthMeter").setAttribute(
        "aria-valuenow", str(result.score)
    )
    document.querySelector("#strengthText").textContent = (
        f"{result.label}. Must contain:"
    )

    html = ""
    for req in result.requirements:
        cls = "met" if req.met else "unmet"
        mark = "✓" if req.met else "✗"
        status = "Requirement met" if req.met else "Requirement not met"
        html += (
            f'<li class="{cls}"><span aria-hidden="true">{mark}</span> '
            f'{req.description}<span class="sr-only"> - {status}</span></li>'
        )
    document.querySelector("#requirements").innerHTML = html


@when("input", "#lengthSlider")
def on_length(event):
    document.querySelector("#lengthValue").textContent = event.target.value


@when("click", "#generateBtn")
def on_generate(event):
    length = int(document.querySelector("#lengthSlider").value)
    state["password"] = generate_password(GenerationConfig(length))
    render()


@when("click", "#toggleVis")
def on_toggle(event):
    state["visible"] = not state["visible"]
    render()


@when("click", "#copyBtn")
async def on_copy(event):
    btn = document.querySelector("#copyBtn")
    if not state["password"]:
        btn.textContent = "NOTHING TO COPY"
    else:
        try:
            await navigator.clipboard.writeText(state["password"])
            btn.textContent = "COPIED!"
        except Exception as exc:
            btn.textContent = "COPY FAILED"
            document.querySelector("#copyError").textContent = str(exc)
    await asyncio.sleep(1.5)
    btn.textContent = "COPY"


render()
document.querySelector("#loading").style.display = "none"
'''


# ── HTML template ─────────────────────────────────────────────────────────
# Uses __PYSCRIPT_VERSION__ and __PYSCRIPT_CODE__ as placeholders
# (no f-strings or .format to avoid escaping CSS braces).

HTML_TEMPLATE = r'''<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Password Generator</title>
    <link rel="stylesheet" href="https://pyscript.net/releases/__PYSCRIPT_VERSION__/core.css">
    <script type="module" src="https://pyscript.net/releases/__PYSCRIPT_VERSION__/core.js"></script>
    <style>
        * { box-sizing: border-box; margin: 0; padding: 0; }
        body {
            min-height: 100vh;
            display: flex;
            flex-direction: column;
            align-items: center;
            justify-content: center;
            gap: 2rem;
            font-family: -apple-system, 'Segoe UI', sans-serif;
            background: linear-gradient(135deg, #bbf7d0, #ffffff);
            color: #18181b;
        }
        h1 { font-size: 3rem; }
        main { width: 100%; max-width: 28rem; display: flex; flex-direction: column; gap: 1.25rem; }
        label { font-size: 0.875rem; font-weight: 500; }
        .field { display: flex; border: 1px solid #d4d4d8; border-radius: 6px; background: #fff; }
        .field input { flex: 1; border: 0; padding: 0.5rem; font-family: monospace; background: transparent; }
        .field button { border: 0; background: transparent; padding: 0 0.75rem; cursor: pointer; font-size: 0.7rem; }
        input[type=range] { width: 100%; }
        #generateBtn { padding: 0.6rem; border: 0; border-radius: 6px; background: #18181b; color: #fff; cursor: pointer; }
        .meter { height: 4px; border-radius: 9999px; background: #e4e4e7; overflow: hidden; }
        #strengthBar { height: 100%; width: 0; transition: all 0.5s ease-out; }
        #strengthText { font-size: 0.875rem; font-weight: 500; }
        #requirements { list-style: none; font-size: 0.75rem; display: flex; flex-direction: column; gap: 0.35rem; }
        #requirements .met { color: #059669; }
        #requirements .unmet { color: #71717a; }
        #copyError { color: #ef4444; font-size: 0.75rem; }
        .sr-only { position: absolute; width: 1px; height: 1px; overflow: hidden; clip: rect(0, 0, 0, 0); }
        #loading { position: fixed; inset: 0; background: #fff; display: flex; align-items: center; justify-content: center; }
    </style>
</head>
<body>
    <div id="loading"><p>Loading&hellip;</p></div>
    <h1>Password Generator</h1>
    <main>
        <label for="password">Generated Password</label>
        <div class="field">
            <input id="password" readonly aria-describedby="strengthText">
            <button type="button" id="toggleVis" aria-label="Show or hide password">SHOW</button>
            <button type="button" id="copyBtn" aria-label="Copy password">COPY</button>
        </div>
        <p id="copyError" role="alert"></p>

        <label for="lengthSlider">Password Length: <span id="lengthValue">12</span></label>
        <input type="range" id="lengthSlider" min="8" max="32" step="1" value="12" aria-label="Password length">

        <button type="button" id="generateBtn">Generate Password</button>

        <div class="meter" id="strengthMeter" role="progressbar"
             aria-valuenow="0" aria-valuemin="0" aria-valuemax="5" aria-label="Password strength">
            <div id="strengthBar"></div>
        </div>
        <p id="strengthText"></p>
        <ul id="requirements" aria-label="Password requirements"></ul>
    </main>

    <!-- Python logic via PyScript -->
    <script type="py">
__PYSCRIPT_CODE__
    </script>
</body>
</html>
'''


# ── Build ──────────────────────────────────────────────────────────────────


def build(out: Path = OUT) -> str:
    py_code = core_source() + _PY_BROWSER

    html = (
        HTML_TEMPLATE
        .replace("__PYSCRIPT_VERSION__", PYSCRIPT_VERSION)
        .replace("__PYSCRIPT_CODE__", py_code)
    )

    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(html, encoding="utf-8")
    print(f"Built {out}  ({len(html):,} bytes)")
    return html


if __name__ == "__main__":
    build()
