#===============================================================================
#  DirLauncher | command_parser.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Decides whether a launcher command template can be executed without a
#  shell, and splits it into executable + argument templates when it can.
#
#  Notes
#  -----
#  - Only used on macOS/Linux. Windows stays in shell mode so that .cmd/.bat
#    targets resolve the way users expect.
#  - A template is rejected as soon as it needs the shell for anything:
#    operators, expansions, or a {path} that sits inside shell quoting.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import re
from typing import List, Optional

from .constants import PATH_PLACEHOLDER
from .models import SimpleCommand
from .path_utils import escape_for_shell, escape_inside_quotes

SHELL_OPERATOR_RE = re.compile(r"[;|&`$><\n\r]")
QUOTES = ("'", '"')


def substitute_path(template: str, value: str) -> str:
    """Replace every {path} occurrence in template."""
    return template.replace(PATH_PLACEHOLDER, value)


def placeholder_inside_quotes(template: str) -> bool:
    quote = ""
    for i, ch in enumerate(template):
        if not quote and ch in QUOTES:
            quote = ch
        elif quote and ch == quote:
            quote = ""
        if quote and template.startswith(PATH_PLACEHOLDER, i):
            return True
    return False


def substitute_escaped(template: str, path: str, platform: str) -> str:
    """Replace every {path} with the path escaped for its quoting context.

    A bare {path} gets quoted; a {path} inside the template's own '...' or
    "..." is escaped for that quote so the path can never close it.
    """
    out: List[str] = []
    quote = ""
    i = 0
    while i < len(template):
        if template.startswith(PATH_PLACEHOLDER, i):
            if quote:
                out.append(escape_inside_quotes(path, quote, platform))
            else:
                out.append(escape_for_shell(path, platform))
            i += len(PATH_PLACEHOLDER)
            continue
        ch = template[i]
        if not quote and ch in QUOTES:
            quote = ch
        elif quote and ch == quote:
            quote = ""
        out.append(ch)
        i += 1
    return "".join(out)


def _tokenize(template: str) -> Optional[List[str]]:
    """Split on spaces/tabs, honoring quotes. None if a quote is left open."""
    tokens: List[str] = []
    current = ""
    quote = ""
    for ch in template:
        if not quote and ch in QUOTES:
            quote = ch
        elif quote and ch == quote:
            quote = ""
        elif not quote and ch in (" ", "\t"):
            if current:
                tokens.append(current)
                current = ""
        else:
            current += ch
    if current:
        tokens.append(current)
    if quote:
        return None
    return tokens


def try_shell_free_decomposition(template: str) -> Optional[SimpleCommand]:
    if not template or not isinstance(template, str):
        return None

    if SHELL_OPERATOR_RE.search(template.replace(PATH_PLACEHOLDER, "")):
        return None

    if placeholder_inside_quotes(template):
        return None

    tokens = _tokenize(template)
    if not tokens:
        return None

    return SimpleCommand(executable=tokens[0], arg_templates=tokens[1:])
