# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Dependency filtering driven by the resolved options."""

from __future__ import annotations

from .pipeline import apply, filter_candidates, filter_dependencies
from .predicates import DependencyPredicate, PredicateError, compile_predicate
from .specs import AnyOfSpec, CallbackSpec, GlobSpec, PredicateSpec, RegexSpec, parse_predicate_spec

__all__ = [
    "AnyOfSpec",
    "CallbackSpec",
    "DependencyPredicate",
    "GlobSpec",
    "PredicateError",
    "PredicateSpec",
    "RegexSpec",
    "apply",
    "compile_predicate",
    "filter_candidates",
    "filter_dependencies",
    "parse_predicate_spec",
]
