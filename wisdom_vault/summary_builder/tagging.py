"""Keyword-frequency tag assignment over a fixed table of topical categories."""
from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)

MAX_TAGS = 4
MIN_TAGS = 2
DEFAULT_TAGS = ("Strategy", "Leadership")


@dataclass(frozen=True)
class KeywordRule:
    """A tag and the lowercase substrings that vote for it."""

    tag: str
    keywords: tuple[str, ...]

    def score(self, lowered: str) -> int:
        # str.count is a non-overlapping left-to-right scan.
        return sum(lowered.count(keyword) for keyword in self.keywords if keyword)


@dataclass(frozen=True)
class TagScore:
    tag: str
    score: int


def validate_rules(rules: Sequence[KeywordRule]) -> tuple[KeywordRule, ...]:
    if len(rules) < MIN_TAGS:
        raise ValueError(f"At least {MIN_TAGS} keyword rules are required, got {len(rules)}")
    seen: set[str] = set()
    for rule in rules:
        if rule.tag in seen:
            raise ValueError(f"Duplicate tag in keyword rules: {rule.tag}")
        seen.add(rule.tag)
    return tuple(rules)


TAG_RULES = validate_rules(
    [
        KeywordRule(
            "Technology",
            (
                "artificial intelligence", " ai ", "machine learning", "deep learning",
                "software", "hardware", "digital", "algorithm", "chip", "semiconductor",
                "computer", "internet", "robot", "automat", "gpt", "llm", "openai",
                "quantum", "cyber", "5g", "huawei", "data center", "cloud computing",
                "app ", "coding", "programming", "neural network", "tech company",
                "smartphone", "processor", "gpu", "nvidia",
            ),
        ),
        KeywordRule(
            "Finance",
            (
                "financ", "banking", "invest", "capital", "fund", "stock market", "gold",
                "econom", "revenue", "profit", "wealth", "trade deficit", "debt", "bond",
                "gdp", "currency", "dollar", "reserve", "monetary policy", "portfolio",
                "hedge", "treasury", "interest rate", "inflation", "market cap",
                "asset", "commodity", "equity", "valuation", "ipo", "venture capital",
                "private equity", "balance sheet", "cash flow",
            ),
        ),
        KeywordRule(
            "Geopolitics",
            (
                "geopolit", "sanction", "warfare", "military", "nation state",
                "international relat", "iran", "russia", "nato", "cold war",
                "diplomac", "foreign policy", "tariff", "us-china", "china's",
                "taiwan", "sovereignty", "empire", "coloniz", "treaty", "alliance",
                "trade war", "election", "superpower", "pentagon", "espionage",
                "intelligence", "surveillance", "arms", "nuclear",
            ),
        ),
        KeywordRule(
            "Leadership",
            (
                "leadership", "leader ", "leading ", "manag", "executive",
                "ceo ", "ceo's", "chairman", "president", "authority",
                "command", "direct", "vision", "decision-mak", "board of directors",
                "founder's", "mentorship", "delegation", "accountability",
                "organizational", "culture", "team building",
            ),
        ),
        KeywordRule(
            "Strategy",
            (
                "strateg", "competitive advantage", "tactic", "positioning",
                "market share", "business model", "framework", "long-term plan",
                "execution", "blueprint", "roadmap", "pivot", "moat",
                "differentiat", "go-to-market", "product-market fit",
                "scaling", "monopol", "vertical integration", "expansion",
            ),
        ),
        KeywordRule(
            "Entrepreneurship",
            (
                "startup", "entrepreneur", "founder", "venture", "amazon",
                "microsoft", "apple", "bezos", "musk", "zuckerberg", "gates",
                "build a company", "company's growth", "business empire",
                "self-made", "hustle", "risk-taking", "bootstrapp", "scale",
                "product launch", "early stage", "series a", "series b",
            ),
        ),
        KeywordRule(
            "History",
            (
                "histor", "rockefeller", "carnegie", "jp morgan", "j.p. morgan",
                "william randolph hearst", "p.t. barnum", "shackleton",
                "estée lauder", "hershey", "sam colt", "alexander graham bell",
                "teddy roosevelt", "ancient", "empire", "civil war", "world war",
                "colonial", "dynasty", "nineteenth century", "19th century",
                "20th century", "1800s", "1900s", "gilded age", "industrial age",
                "golden age",
            ),
        ),
        KeywordRule(
            "Innovation",
            (
                "innovat", "invent", "disrupt", "pioneer", "breakthrough",
                "patent", "revolutioniz", "r&d", "research", "discovery",
                "new product", "transform", "novel approach", "first time",
                "unprecedented", "cutting-edge", "state-of-the-art",
                "prototype", "iteration", "experimentation",
            ),
        ),
        KeywordRule(
            "Psychology",
            (
                "mindset", "behavio", "habit", "psycholog", "mental health",
                "cognitive", "bias", "emotion", "motivat", "wisdom", "philosophy",
                "belief", "principl", "decision mak", "human nature", "character",
                "ego", "self-aware", "think", "instinct", "perception",
                "identity", "resilient mind", "stoic", "mental model",
                "introspect", "self-discipline",
            ),
        ),
        KeywordRule(
            "Resilience",
            (
                "resilience", "resilient", "persist", "overcome", "failure",
                "setback", "recover", "endure", "adversity", "struggle",
                "surviv", "persever", "grit", "bounce back", "hardship",
                "comeback", "crisis", "defeat", "refusal to quit",
                "never give up", "dark times", "rebuilding", "second chance",
            ),
        ),
    ]
)


def score_tags(corpus: str, rules: Sequence[KeywordRule] = TAG_RULES) -> list[TagScore]:
    """Score every rule against ``corpus``, highest first, ties in table order."""

    lowered = corpus.lower()
    scores = [TagScore(rule.tag, rule.score(lowered)) for rule in rules]
    return sorted(scores, key=lambda entry: entry.score, reverse=True)


def assign_tags(corpus: str, rules: Sequence[KeywordRule] = TAG_RULES) -> list[str]:
    scores = score_tags(corpus, rules)
    tags = [entry.tag for entry in scores if entry.score > 0][:MAX_TAGS]
    if not tags:
        return list(DEFAULT_TAGS)
    if len(tags) == 1:
        runner = next((entry for entry in scores if entry.tag != tags[0]), None)
        if runner is not None:
            tags.append(runner.tag)
    return tags
