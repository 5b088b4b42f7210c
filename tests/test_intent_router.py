"""Tests for the keyword-cascade tool router."""

import pytest

from switchboard.core.tools import Tool
from switchboard.nlp.intent_router import DEFAULT_DECISION, ROUTING_RULES, route, rule_router


SAMPLE_PROMPTS = [
    "write code for a website",
    "debug my python function",
    "generate a detailed image of a dragon",
    "a short cinematic clip of the ocean",
    "compose a song with lyrics",
    "pitch deck for investors",
    "a voiceover for my trailer",
    "asdkjqwe",
    "",
]


def test_coding_website_prefers_app_builder():
    decision = route("write code for a website")

    assert decision.tool == Tool.LOVABLE
    assert decision.confidence == 0.85
    assert decision.alternatives == (Tool.CHATGPT, Tool.FRAMER_AI)


def test_plain_coding_goes_to_chatgpt():
    decision = route("debug my python function")

    assert decision.tool == Tool.CHATGPT
    assert decision.confidence == 0.88
    assert decision.alternatives == (Tool.PERPLEXITY, Tool.LOVABLE)


def test_default_fallback():
    decision = route("asdkjqwe")

    assert decision.tool == Tool.CHATGPT
    assert decision.confidence == 0.75
    assert [alt.value for alt in decision.alternatives] == ["perplexity", "gamma"]


def test_empty_and_none_fall_through_to_default():
    assert route("") == DEFAULT_DECISION
    assert route(None) == DEFAULT_DECISION


def test_image_sub_rules_in_order():
    assert route("generate a detailed image of a dragon").tool == Tool.SD_IMAGE
    assert route("a logo for my bakery").tool == Tool.CANVA


def test_video_sub_rules():
    decision = route("a short cinematic clip of the ocean")

    assert decision.tool == Tool.KAIBER
    assert decision.confidence == 0.84


def test_music_lyrics_goes_to_udio():
    assert route("compose a song with lyrics").tool == Tool.UDIO


def test_presentation_and_voice():
    assert route("pitch deck for investors").tool == Tool.GAMMA
    assert route("a voiceover for my trailer").tool == Tool.ELEVENLABS


def test_matching_is_case_insensitive():
    assert route("WRITE CODE FOR A WEBSITE") == route("write code for a website")


def test_category_order():
    names = [rule.name for rule in ROUTING_RULES]

    assert names == [
        "coding", "reasoning", "research", "image", "website", "video", "voice",
        "transcription", "music", "presentation", "narrative", "writing",
    ]


def test_every_category_ends_with_catch_all_branch():
    for rule in ROUTING_RULES:
        assert rule.branches[-1].keywords == ()


@pytest.mark.parametrize("prompt", SAMPLE_PROMPTS)
def test_decision_invariants(prompt):
    decision = route(prompt)

    assert route(prompt) == decision
    assert 0 <= decision.confidence <= 1
    assert decision.tool not in decision.alternatives
    assert len(set(decision.alternatives)) == len(decision.alternatives)
    assert len(decision.alternatives) <= 2


def test_every_branch_respects_invariants():
    for rule in ROUTING_RULES:
        for branch in rule.branches:
            decision = branch.decision
            assert 0.75 <= decision.confidence <= 0.88
            assert len(decision.alternatives) == 2
            assert decision.tool not in decision.alternatives
            assert decision.alternatives[0] != decision.alternatives[1]


def test_rule_router_alias():
    assert rule_router("pitch deck") == route("pitch deck")


def test_to_dict_uses_plain_tags():
    assert route("asdkjqwe").to_dict() == {
        "tool": "chatgpt",
        "confidence": 0.75,
        "alternatives": ["perplexity", "gamma"],
    }
