"""Tests for file context extraction."""

from __future__ import annotations

import pytest

from namer_suggester.analysis.context import (
    determine_domain,
    extract_file_context,
    extract_header_comment,
    extract_imports,
)
from namer_suggester.constants import DomainTag


class TestDetermineDomain:
    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("function App() { return null; }", DomainTag.REACT_COMPONENT),
            ("const Header = () => null;", DomainTag.REACT_COMPONENT),
            ("const [n, setN] = useState(0);", DomainTag.REACT_HOOKS),
            ("describe('cart', () => {});", DomainTag.TESTING),
            ("axios.get('/users');", DomainTag.API),
            ("let total = 0;", DomainTag.GENERAL),
        ],
    )
    def test_classification(self, code: str, expected: DomainTag) -> None:
        assert determine_domain(code) == expected

    def test_first_match_wins(self) -> None:
        code = "function App() {}\ntest('renders', () => {});"
        assert determine_domain(code) == DomainTag.REACT_COMPONENT

    def test_hooks_before_tests(self) -> None:
        code = "useEffect(() => {});\ntest('x', () => {});"
        assert determine_domain(code) == DomainTag.REACT_HOOKS


class TestImports:
    def test_extracts_module_paths_in_order(self) -> None:
        code = (
            "import React from 'react';\n"
            'import { get } from "./http";\n'
            "import './side-effect.css';\n"
        )
        assert extract_imports(code) == ["react", "./http"]

    def test_no_imports(self) -> None:
        assert extract_imports("const a = require('a');") == []


class TestHeaderComment:
    def test_line_comment(self) -> None:
        code = "// Utilities for carts\nexport const a = 1;"
        assert extract_header_comment(code) == "// Utilities for carts"

    def test_block_comment(self) -> None:
        code = "/**\n * Cart model.\n */\nexport class Cart {}"
        assert extract_header_comment(code) == "/**\n * Cart model.\n */"

    def test_trailing_comment_is_not_a_header(self) -> None:
        assert extract_header_comment("const a = 1; // note") == ""


def test_extract_file_context() -> None:
    code = "// Users API\nimport axios from 'axios';\nfetch('/users');"
    context = extract_file_context(code)
    assert context.domain == DomainTag.API
    assert context.imports == ("axios",)
    assert context.header_comments == "// Users API"
