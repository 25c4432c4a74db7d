"""Centralized RSML source cases used across lexer/parser/lint tests."""

from __future__ import annotations

import textwrap
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RsmlCase:
    name: str
    source: str
    should_parse_cleanly: bool = True


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


def case_id(case: RsmlCase) -> str:
    return case.name


PARSER_CASES: tuple[RsmlCase, ...] = (
    RsmlCase(name="empty_document", source=""),
    RsmlCase(name="empty_rule", source="TextButton {  }"),
    RsmlCase(name="named_selector_with_hex_color", source="#myId { !BackgroundColor3 = #FF0000; }"),
    RsmlCase(name="root_variable_offset", source="$spacing = 10px;"),
    RsmlCase(
        name="derives_in_order",
        source=_dedent(
            """
            @derive "./a.rsml"
            @derive "b.rsml"
            """
        ),
    ),
    RsmlCase(name="priority_then_tag_rule", source="@priority 5; .active { }"),
    RsmlCase(name="offset_pair_tuple", source="Frame { !Size = (10px, 20px); }"),
    RsmlCase(
        name="full_stylesheet",
        source=_dedent(
            """
            --[[
                Shared button styles.
            ]]
            @derive "./theme.rsml", "./fonts.rsml";
            $accent = tw:blue:600;
            $pad = 8px;

            TextButton {
                @priority 10;
                BackgroundColor3 = $accent;
                !Size = (50% 4px, 0% 32px); -- scale and offset per axis
                Font = ("rbxasset://fonts/families/GothamSSm.json", Enum.FontWeight.Bold);
                TextXAlignment = Enum.TextXAlignment.Left;

                :hover {
                    BackgroundColor3 = css:cornflowerblue;
                }

                > .icon {
                    Image = rbxassetid://1234567;
                    Visible = true;
                }
            }
            """
        ),
    ),
    RsmlCase(
        name="nested_scopes_with_variables",
        source=_dedent(
            """
            $base = 1;
            Frame {
                $inner = 2;
                Frame {
                    !Transparency = $inner;
                    !ZIndex = $base;
                }
            }
            """
        ),
    ),
    RsmlCase(
        name="macro_definition",
        source=_dedent(
            """
            @macro Rounded($!radius) {
                UICorner {
                    CornerRadius = (0%, 8px);
                }
            }
            """
        ),
    ),
    RsmlCase(
        name="keyword_constructors",
        source=_dedent(
            """
            Frame {
                BackgroundColor3 = rgb(255, 128, 0);
                BorderColor3 = color3(0, 0.5, 1);
                Position = udim2(0.5, 0, 0.5, 0);
                Padding = udim(0, 4);
                AnchorPoint = vec2(0.5, 0.5);
                Offset = vec3(1, 2, 3);
                SliceCenter = rect(4, 4, 12, 12);
            }
            """
        ),
    ),
    RsmlCase(name="missing_semicolon_before_close", source="Frame { !Visible = false }"),
    RsmlCase(name="unmatched_close", source="} Frame { }", should_parse_cleanly=False),
    RsmlCase(name="missing_close", source="Frame { !Visible = true;", should_parse_cleanly=False),
    RsmlCase(name="arithmetic_is_dropped", source="$x = 1 + 2;", should_parse_cleanly=False),
    RsmlCase(name="unknown_tuple_shape", source='$x = ("a", 1, true, 2, 3);', should_parse_cleanly=False),
    RsmlCase(name="unrecognized_input", source="Frame { @@ }", should_parse_cleanly=False),
)

LEXER_CASES: tuple[RsmlCase, ...] = (
    RsmlCase(name="comments_only", source="-- single\n--[[ multi\nline ]]\n   \t\f"),
    RsmlCase(name="palette_colors", source="tw:red tw:slate:950 css:blueviolet bc:reallyred #FFF"),
    RsmlCase(name="sigils", source="#name .tag :state ::pseudo $!arg $var !prop"),
    RsmlCase(name="numbers", source="1 -2 .5 3.25 10px -4.5px 50% 100%"),
)

ALL_RSML_CASES: tuple[RsmlCase, ...] = PARSER_CASES + LEXER_CASES
