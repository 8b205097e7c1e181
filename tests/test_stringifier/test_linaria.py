"""Tests for the template-literal printer."""

from linaria_css.config import PlaceholderConfig
from linaria_css.model import (
    Comment,
    Declaration,
    Document,
    Input,
    Root,
    Rule,
    Source,
    node_from_dict,
)
from linaria_css.stringifier import LinariaStringifier, stringify, to_string


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

STYLED_SOURCE = (
    "const Title = styled.h1`\n"
    "  ${mixin}\n"
    "  color: ${color};\n"
    "  ${prop}: 1px;\n"
    "  ${nested} & {\n"
    "    color: blue;\n"
    "  }\n"
    "`;\n"
)


def _styled_root() -> Root:
    """The tree a parser produces for STYLED_SOURCE."""
    return Root(
        raws={
            "codeBefore": "const Title = styled.h1`",
            "codeAfter": "`;\n",
            "after": "\n",
            "semicolon": True,
            "linariaTemplateExpressions": ["${mixin}", "${color}", "${prop}", "${nested}"],
        },
        nodes=[
            Comment(text="pcss-lin:0", raws={"before": "\n  ", "left": "", "right": ""}),
            Declaration(prop="color", value="pcss_lin1", raws={"before": "\n  ", "between": ": "}),
            Declaration(prop="pcss-lin:2", value="1px", raws={"before": "\n  ", "between": ": "}),
            Rule(
                selector="pcss_lin3 &",
                raws={"before": "\n  ", "between": " ", "after": "\n  ", "semicolon": True},
                nodes=[
                    Declaration(prop="color", value="blue", raws={"before": "\n    ", "between": ": "}),
                ],
            ),
        ],
    )


def _plain_root() -> Root:
    return Root(
        raws={"codeBefore": "const a = css`", "codeAfter": "`;", "after": "\n", "semicolon": True},
        nodes=[
            Declaration(prop="color", value="red", raws={"before": "\n  ", "between": ": "}),
            Rule(
                selector=".foo",
                raws={"before": "\n  ", "between": " ", "after": "\n  ", "semicolon": True},
                nodes=[Declaration(prop="margin", value="0", raws={"before": "\n    ", "between": ": "})],
            ),
        ],
    )


def _in_root(*nodes, expressions=None, **raws) -> Root:
    if expressions is not None:
        raws["linariaTemplateExpressions"] = expressions
    return Root(raws=raws, nodes=list(nodes))


# ---------------------------------------------------------------------------
# Round trips
# ---------------------------------------------------------------------------


class TestRoundTrip:
    def test_plain_css_reprinted_exactly(self):
        assert to_string(_plain_root()) == (
            "const a = css`\n  color: red;\n  .foo {\n    margin: 0;\n  }\n`;"
        )

    def test_expressions_restored(self):
        assert to_string(_styled_root()) == STYLED_SOURCE

    def test_idempotent(self):
        root = _styled_root()
        assert to_string(root) == to_string(root)

    def test_expression_table_untouched(self):
        root = _styled_root()
        to_string(root)
        assert root.raws["linariaTemplateExpressions"] == [
            "${mixin}",
            "${color}",
            "${prop}",
            "${nested}",
        ]

    def test_node_to_string(self):
        assert _styled_root().to_string() == STYLED_SOURCE

    def test_loaded_tree(self):
        data = {
            "type": "document",
            "nodes": [
                {
                    "type": "root",
                    "raws": {
                        "codeBefore": "css`",
                        "codeAfter": "`",
                        "after": "",
                        "linariaTemplateExpressions": ["${w}"],
                    },
                    "nodes": [
                        {
                            "type": "decl",
                            "prop": "width",
                            "value": "pcss_lin0",
                            "raws": {"before": "", "between": ":"},
                        }
                    ],
                }
            ],
        }
        assert to_string(node_from_dict(data)) == "css`width:${w}`"


# ---------------------------------------------------------------------------
# Placeholders
# ---------------------------------------------------------------------------


class TestDeclarationPlaceholders:
    def test_value_placeholder(self):
        decl = Declaration(prop="margin", value="a pcss_lin0 b", raws={"between": ": "})
        _in_root(decl, expressions=["${x}"])
        assert to_string(decl) == "margin: a ${x} b"

    def test_full_placeholder_property(self):
        decl = Declaration(prop="pcss-lin:2", value="red", raws={"between": ": "})
        _in_root(decl, expressions=["a", "b", "color"])
        assert to_string(decl) == "color: red"

    def test_unresolved_property_kept(self):
        decl = Declaration(prop="pcss-lin:2", value="red", raws={"between": ": "})
        _in_root(decl, expressions=["a"])
        assert to_string(decl) == "pcss-lin:2: red"

    def test_no_expression_table(self):
        decl = Declaration(prop="color", value="pcss_lin0", raws={"between": ":"})
        _in_root(decl)
        assert to_string(decl) == "color:pcss_lin0"

    def test_important(self):
        decl = Declaration(prop="color", value="pcss_lin0", important=True, raws={"between": ":"})
        _in_root(decl, expressions=["${c}"])
        assert to_string(decl) == "color:${c} !important"

    def test_important_raw(self):
        decl = Declaration(
            prop="color",
            value="red",
            important=True,
            raws={"between": ":", "important": " ! important"},
        )
        assert to_string(decl) == "color:red ! important"

    def test_placeholder_in_override_value(self):
        decl = Declaration(
            prop="width",
            value="ignored",
            raws={"between": ": ", "linariaValue": "calc( pcss_lin0 )"},
        )
        _in_root(decl, expressions=["${w}"])
        assert to_string(decl) == "width: calc( ${w} )"


class TestRulePlaceholders:
    def test_selector_placeholder(self):
        rule = Rule(selector="pcss_lin0 .child", raws={"between": " ", "after": ""})
        _in_root(rule, expressions=["${Parent}"])
        assert to_string(rule) == "${Parent} .child {}"

    def test_own_semicolon(self):
        rule = Rule(selector="pcss_lin0", raws={"between": "", "after": "", "ownSemicolon": ";"})
        _in_root(rule, expressions=["${mixin}"])
        assert to_string(rule) == "${mixin}{};"

    def test_selector_override(self):
        rule = Rule(selector="a", raws={"between": " ", "after": "", "linariaSelector": "pcss_lin0:hover"})
        _in_root(rule, expressions=["${x}"])
        assert to_string(rule) == "pcss_lin0:hover {}"


class TestCommentPlaceholders:
    def test_comment_replaced_by_expression(self):
        comment = Comment(text="pcss-lin:1", raws={"left": " ", "right": " "})
        _in_root(comment, expressions=["${a}", "${b}"])
        assert to_string(comment) == "${b}"

    def test_bad_index_prints_comment(self):
        comment = Comment(text="pcss-lin:5", raws={"left": " ", "right": " "})
        _in_root(comment, expressions=["${a}", "${b}"])
        assert to_string(comment) == "/* pcss-lin:5 */"

    def test_regular_comment(self):
        comment = Comment(text="todo", raws={"left": " ", "right": " "})
        _in_root(comment, expressions=["${a}"])
        assert to_string(comment) == "/* todo */"

    def test_partial_match_prints_comment(self):
        comment = Comment(text="pcss-lin:0 extra", raws={"left": "", "right": ""})
        _in_root(comment, expressions=["${a}"])
        assert to_string(comment) == "/*pcss-lin:0 extra*/"


# ---------------------------------------------------------------------------
# Escaping
# ---------------------------------------------------------------------------


class TestEscaping:
    def test_css_text_escaped(self):
        decl = Declaration(prop="content", value='"\\`"', raws={"between": ": "})
        assert to_string(decl) == r'content: "\\\`"'

    def test_root_code_not_escaped(self):
        root = _in_root(
            Declaration(prop="content", value='"`"', raws={"between": ":"}),
            codeBefore="x = css`",
            codeAfter="`",
        )
        assert to_string(root) == 'x = css`content:"\\`"`'

    def test_fragments_keep_node_and_position(self):
        calls: list[tuple] = []
        root = _plain_root()
        stringify(root, lambda text, node=None, position=None: calls.append((text, node, position)))
        assert calls[0] == ("const a = css`", root, "start")
        assert calls[-1] == ("`;", root, "end")
        rule = root.nodes[1]
        assert (".foo {", rule, "start") in calls
        assert ("}", rule, "end") in calls


# ---------------------------------------------------------------------------
# Raw overrides
# ---------------------------------------------------------------------------


class TestRawOverrides:
    def _printer(self) -> LinariaStringifier:
        return LinariaStringifier(lambda text, node=None, position=None: None)

    def test_before_override(self):
        decl = Declaration(prop="a", value="b", raws={"before": " ", "linariaBefore": "\n  "})
        _in_root(Declaration(prop="x", value="y"), decl)
        assert self._printer().raw(decl, "before") == "\n  "

    def test_empty_generic_ignores_override(self):
        decl = Declaration(prop="a", value="b", raws={"before": "", "linariaBefore": "\n  "})
        _in_root(Declaration(prop="x", value="y"), decl)
        assert self._printer().raw(decl, "before") == ""

    def test_missing_generic_falls_back_to_detection(self):
        decl = Declaration(prop="a", value="b", raws={"linariaBefore": "\t"})
        _in_root(Declaration(prop="x", value="y", raws={"before": "\n  "}), decl)
        assert self._printer().raw(decl, "before") == "\n"

    def test_between_override(self):
        decl = Declaration(prop="a", value="b", raws={"between": ": ", "linariaBetween": ":  "})
        assert to_string(decl) == "a:  b"

    def test_after_override(self):
        rule = Rule(
            selector="a",
            raws={"between": " ", "after": "\n", "linariaAfter": "\n    "},
            nodes=[Declaration(prop="x", value="y", raws={"before": "\n      ", "between": ": "})],
        )
        _in_root(rule)
        assert to_string(rule) == "a {\n      x: y\n    }"

    def test_other_raws_not_overridden(self):
        comment = Comment(text="c", raws={"left": " ", "linariaLeft": "!"})
        assert self._printer().raw(comment, "left") == " "

    def test_raw_value_override_presence(self):
        decl = Declaration(prop="a", value="b", raws={"linariaValue": ""})
        assert self._printer().raw_value(decl, "value") == ""

    def test_raw_value_override_none(self):
        decl = Declaration(prop="a", value="b", raws={"linariaValue": None})
        assert self._printer().raw_value(decl, "value") == "null"

    def test_raw_value_override_bool(self):
        decl = Declaration(prop="a", value="b", raws={"linariaValue": False})
        assert self._printer().raw_value(decl, "value") == "false"

    def test_none_override_printed_in_declaration(self):
        decl = Declaration(prop="a", value="b", raws={"between": ":", "linariaValue": None})
        assert to_string(decl) == "a:null"

    def test_raw_value_override_text_form(self):
        decl = Declaration(prop="z-index", value="1", raws={"linariaValue": 2})
        assert self._printer().raw_value(decl, "value") == "2"

    def test_raw_value_without_override(self):
        decl = Declaration(prop="a", value="b", raws={"value": {"value": "b", "raw": "b/**/"}})
        assert self._printer().raw_value(decl, "value") == "b/**/"


class TestRootAfter:
    def test_linaria_after_preferred(self):
        root = _in_root(after="\n", linariaAfter="\n    ", codeBefore="css`", codeAfter="`")
        assert to_string(root) == "css`\n    `"

    def test_generic_after(self):
        root = _in_root(after="\n", codeBefore="css`", codeAfter="`")
        assert to_string(root) == "css`\n`"

    def test_missing_code_raws(self):
        assert to_string(Root()) == ""


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------


class TestDocument:
    def test_empty_document_prints_input(self):
        source = "const x = 1;\nexport default x;\n"
        doc = Document(source=Source(input=Input(css=source)))
        assert to_string(doc) == source

    def test_empty_document_with_empty_input(self):
        doc = Document(source=Source(input=Input(css="")))
        assert to_string(doc) == ""

    def test_empty_document_without_source(self):
        assert to_string(Document()) == ""

    def test_document_with_roots(self):
        first = _styled_root()
        second = _plain_root()
        doc = Document(nodes=[first, second])
        assert to_string(doc) == STYLED_SOURCE + to_string(second)

    def test_empty_document_input_not_escaped(self):
        doc = Document(source=Source(input=Input(css="a`\\")))
        assert to_string(doc) == "a`\\"


class TestCustomConfig:
    def test_custom_markers_and_namespace(self):
        config = PlaceholderConfig(
            placeholder_text="__FULL",
            short_placeholder_text="__S",
            namespace="tpl",
            expressions_key="exprs",
        )
        decl = Declaration(
            prop="__FULL:0",
            value="x",
            raws={"between": ": ", "before": " ", "tplBefore": "\n", "tplValue": "__S1 solid"},
        )
        root = Root(raws={"exprs": ["${p}", "${w}"]}, nodes=[Declaration(prop="a", value="b"), decl])
        assert to_string(root, config) == "a: b;\n${p}: ${w} solid"
