#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ANALYZER - MODEL-COMPASS 1.0
============================

Classifies a prompt without calling any model.

This module analyzes input text to determine:
- Intent (coding, creative, analysis, ...)
- Domain (technology, finance, creative arts, ...)
- Complexity level
- Tone
- Important keywords

Detection is keyword counting plus a handful of regex overrides. It is
deterministic and fast: the whole analysis costs well under a
millisecond, which leaves the latency budget to the scorer.

The analysis allows the scorer to rank the candidates.
"""

from typing import Dict, List, Optional, Tuple, Union, TYPE_CHECKING
from dataclasses import dataclass, field
from enum import Enum
import re
import logging

from .helpers import tokenize, extract_keywords as _extract_keywords

logger = logging.getLogger(__name__)

# Avoid circular imports
if TYPE_CHECKING:
    from .context import HumanContext

# =============================================================================
# CLASSIFICATION ENUMS
# =============================================================================

class Intent(Enum):
    """What the user wants done. Declaration order breaks score ties."""
    CODING = "coding"
    CREATIVE = "creative"
    ANALYSIS = "analysis"
    FACTUAL = "factual"
    CONVERSATION = "conversation"
    TASK = "task"
    BRAINSTORM = "brainstorm"
    TRANSLATION = "translation"
    SUMMARIZATION = "summarization"
    EXTRACTION = "extraction"


class Domain(Enum):
    """Subject area of the prompt."""
    TECHNOLOGY = "technology"
    BUSINESS = "business"
    HEALTH = "health"
    LEGAL = "legal"
    FINANCE = "finance"
    EDUCATION = "education"
    SCIENCE = "science"
    CREATIVE_ARTS = "creative_arts"
    LIFESTYLE = "lifestyle"
    GENERAL = "general"


class Complexity(Enum):
    """Detected complexity level."""
    QUICK = "quick"           # Short answer expected
    STANDARD = "standard"     # Regular task
    DEMANDING = "demanding"   # Multi-part or deep work


class Tone(Enum):
    """Register the user writes in."""
    CASUAL = "casual"
    FOCUSED = "focused"
    CURIOUS = "curious"
    FRUSTRATED = "frustrated"
    URGENT = "urgent"
    PLAYFUL = "playful"
    PROFESSIONAL = "professional"


class Modality(Enum):
    """Input channel(s) of the request."""
    TEXT = "text"
    IMAGE = "image"
    VOICE = "voice"
    TEXT_IMAGE = "text+image"
    TEXT_VOICE = "text+voice"


# =============================================================================
# ANALYSIS RESULT
# =============================================================================

@dataclass(frozen=True)
class QueryAnalysis:
    """Result of prompt analysis."""
    intent: Intent
    domain: Domain
    complexity: Complexity
    tone: Tone
    modality: Modality
    keywords: Tuple[str, ...] = field(default_factory=tuple)
    human_context_used: bool = False

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            "intent": self.intent.value,
            "domain": self.domain.value,
            "complexity": self.complexity.value,
            "tone": self.tone.value,
            "modality": self.modality.value,
            "keywords": list(self.keywords),
            "human_context_used": self.human_context_used,
        }


# =============================================================================
# KEYWORD DICTIONARIES
# =============================================================================

INTENT_KEYWORDS: Dict[Intent, frozenset] = {
    Intent.CODING: frozenset({
        "code", "coding", "function", "program", "programming", "debug", "bug",
        "api", "database", "algorithm", "implement", "python", "javascript",
        "typescript", "java", "sql", "script", "class", "compile", "refactor",
        "endpoint", "rest", "react", "array", "sort", "git", "deploy", "regex",
        "software", "backend", "frontend", "query",
    }),
    Intent.CREATIVE: frozenset({
        "story", "poem", "poetry", "fiction", "novel", "creative", "narrative",
        "lyrics", "song", "screenplay", "character", "plot", "fantasy",
        "imagine", "tale", "verse", "compose", "haiku", "dialogue", "sonnet",
    }),
    Intent.ANALYSIS: frozenset({
        "analyze", "analyse", "analysis", "compare", "comparison", "evaluate",
        "assess", "review", "examine", "pros", "cons", "tradeoffs", "patterns",
        "trends", "data", "insights", "breakdown", "critique", "investigate",
        "statistics", "metrics",
    }),
    Intent.FACTUAL: frozenset({
        "what", "who", "when", "where", "define", "definition", "fact", "facts",
        "capital", "history", "explain", "meaning", "population", "invented",
    }),
    Intent.CONVERSATION: frozenset({
        "hi", "hello", "hey", "thanks", "thank", "chat", "talk", "howdy",
        "greetings", "bye", "feeling", "lonely", "rough", "yourself",
    }),
    Intent.TASK: frozenset({
        "schedule", "plan", "organize", "remind", "todo", "checklist", "email",
        "draft", "itinerary", "agenda", "timeline", "calendar", "steps",
        "prepare", "arrange",
    }),
    Intent.BRAINSTORM: frozenset({
        "brainstorm", "ideas", "idea", "suggest", "suggestions", "options",
        "alternatives", "possibilities", "solutions", "innovative",
    }),
    Intent.TRANSLATION: frozenset({
        "translate", "translation", "spanish", "french", "german", "japanese",
        "chinese", "mandarin", "italian", "portuguese", "korean", "english",
        "language",
    }),
    Intent.SUMMARIZATION: frozenset({
        "summarize", "summarise", "summary", "condense", "tldr", "recap",
        "shorten", "overview", "gist", "digest",
    }),
    Intent.EXTRACTION: frozenset({
        "extract", "extraction", "pull", "parse", "entities", "names",
        "fields", "scrape",
    }),
}

DOMAIN_KEYWORDS: Dict[Domain, frozenset] = {
    Domain.TECHNOLOGY: frozenset({
        "code", "software", "programming", "python", "javascript", "api",
        "database", "server", "cloud", "computer", "computing", "algorithm",
        "app", "web", "network", "machine", "learning", "ai", "robot",
        "android", "architecture", "function", "array", "microservices",
        "kubernetes", "docker", "devops", "cybersecurity", "data",
    }),
    Domain.BUSINESS: frozenset({
        "business", "marketing", "sales", "strategy", "startup", "company",
        "customer", "customers", "revenue", "management", "corporate",
        "governance", "product", "market", "brand", "competitor", "pitch",
    }),
    Domain.HEALTH: frozenset({
        "health", "medical", "doctor", "symptoms", "disease", "diet",
        "exercise", "fitness", "nutrition", "sleep", "mental", "therapy",
        "medication", "wellness", "vitamin",
    }),
    Domain.LEGAL: frozenset({
        "legal", "law", "lawyer", "contract", "court", "rights", "lawsuit",
        "regulation", "compliance", "liability", "copyright", "patent",
        "trademark", "gdpr", "clause",
    }),
    Domain.FINANCE: frozenset({
        "finance", "financial", "money", "invest", "investment", "investing",
        "stocks", "stock", "budget", "tax", "taxes", "loan", "mortgage",
        "bank", "compound", "interest", "portfolio", "crypto", "retirement",
    }),
    Domain.EDUCATION: frozenset({
        "learn", "teach", "teacher", "student", "students", "school", "course",
        "lesson", "study", "exam", "homework", "university", "academic",
        "curriculum", "tutorial",
    }),
    Domain.SCIENCE: frozenset({
        "science", "scientific", "physics", "chemistry", "biology", "quantum",
        "experiment", "theory", "research", "molecule", "evolution", "energy",
        "astronomy", "climate", "genetics",
    }),
    Domain.CREATIVE_ARTS: frozenset({
        "art", "music", "story", "poem", "poetry", "painting", "design",
        "creative", "novel", "film", "movie", "song", "drawing", "fiction",
        "writing", "artist", "photography",
    }),
    Domain.LIFESTYLE: frozenset({
        "travel", "recipe", "cooking", "food", "fashion", "home", "garden",
        "hobby", "relationship", "dating", "wedding", "party", "vacation",
        "trip", "pet", "weekend",
    }),
}

COMPLEXITY_SIMPLE_INDICATORS = frozenset({
    "quick", "simple", "short", "brief", "just", "basic", "easy", "yes",
    "thanks", "hi", "hello", "hey", "define",
})

COMPLEXITY_DEMANDING_INDICATORS = frozenset({
    "comprehensive", "detailed", "complex", "architecture", "design",
    "multiple", "phases", "implementation", "thorough", "system", "scalable",
    "optimize", "strategy", "evaluate", "compare", "research", "extensive",
    "distributed", "framework", "integrate", "steps", "patterns",
})

TONE_INDICATORS: Dict[Tone, frozenset] = {
    Tone.CASUAL: frozenset({
        "hey", "dude", "lol", "cool", "whats", "gonna", "wanna", "yeah",
        "btw", "kinda", "stuff",
    }),
    Tone.FOCUSED: frozenset({
        "specifically", "exactly", "precisely", "step", "focus", "only",
        "requirements", "must",
    }),
    Tone.CURIOUS: frozenset({
        "curious", "wonder", "wondering", "interesting", "fascinated",
        "why", "how",
    }),
    Tone.FRUSTRATED: frozenset({
        "frustrated", "still", "doesnt", "stuck", "broken", "annoying",
        "again", "nothing", "useless", "hate", "wrong",
    }),
    Tone.URGENT: frozenset({
        "urgent", "asap", "immediately", "now", "quickly", "deadline",
        "emergency", "hurry",
    }),
    Tone.PLAYFUL: frozenset({
        "haha", "fun", "silly", "joke", "funny", "lmao", "hehe", "pun",
    }),
    Tone.PROFESSIONAL: frozenset({
        "regards", "kindly", "please", "formal", "report", "proposal",
        "stakeholders", "memo",
    }),
}

# Any of these alongside "write" makes a writing request creative
CREATIVE_WRITE_TARGETS = frozenset({
    "story", "poem", "fiction", "novel", "narrative", "creative", "song",
    "lyrics", "screenplay",
})

CREATIVE_CONTEXT_BOOSTERS = frozenset({
    "imagine", "fantasy", "fictional", "character", "plot",
})

# Without one of these, coding keywords alone are weak evidence
CODING_CONTEXT_WORDS = frozenset({
    "code", "function", "programming", "debug", "api", "database",
    "algorithm", "implement",
})

CREATIVE_CONTEXT_WORDS = (
    "story", "poem", "song", "narrative", "character", "plot", "fiction",
    "novel", "screenplay", "lyrics", "verse", "chapter", "protagonist",
    "antagonist", "theme", "metaphor", "imagery",
)

EMOTIONAL_CONCEPTS = (
    "love", "friendship", "betrayal", "hope", "fear", "courage", "adventure",
    "mystery", "discovery", "meaning", "journey",
)

# =============================================================================
# DETECTION PATTERNS
# =============================================================================

CREATIVE_WRITING_PATTERNS = [
    r"\bwrite\s+(a\s+)?(short\s+)?story\b",
    r"\bwrite\s+(a\s+)?poem\b",
    r"\bwrite\s+(a\s+)?novel\b",
    r"\bwrite\s+(a\s+)?script\b",
    r"\bwrite\s+(a\s+)?screenplay\b",
    r"\bwrite\s+(a\s+)?song\b",
    r"\bwrite\s+(a\s+)?lyrics\b",
    r"\bwrite\s+(an?\s+)?essay\b",
    r"\bwrite\s+(a\s+)?blog\s+post\b",
    r"\bwrite\s+(an?\s+)?article\b",
    r"\bcreate\s+(a\s+)?story\b",
    r"\bcreate\s+(a\s+)?poem\b",
    r"\bcompose\s+(a\s+)?poem\b",
    r"\bcompose\s+(a\s+)?song\b",
    r"\btell\s+(me\s+)?(a\s+)?story\b",
    r"\bstory\s+about\b",
    r"\bpoem\s+about\b",
    r"\bfiction\s+about\b",
    r"\bnarrative\s+about\b",
    r"\bcreative\s+writing\b",
    r"\bimagine\s+a\b",
    r"\bonce\s+upon\s+a\s+time\b",
]

# Image-generation phrasing, routed as creative work
IMAGE_GENERATION_PATTERNS = [
    r"\b(generate|create|make|draw|design|paint|render|produce)\s+(me\s+)?(an?\s+)?"
    r"(image|picture|photo|photograph|illustration|artwork|poster|logo|icon|banner|"
    r"thumbnail|avatar|wallpaper|portrait|landscape|cityscape)\b",
    r"\b(draw|paint|sketch)\s+me\s+(an?\s+)?",
    r"\b(image|picture|photo|illustration|artwork|poster|logo|icon)\s+of\b",
    r"\bdall-?e\b",
    r"\bmidjourney\b",
    r"\bstable\s+diffusion\b",
    r"\btext[\s-]to[\s-]image\b",
]

# A match vetoes the creative override
TECH_CODE_PATTERNS = [
    r"\bwrite\s+(a\s+)?function\b",
    r"\bwrite\s+(a\s+)?code\b",
    r"\bwrite\s+(a\s+)?script\s+that\b",
    r"\bwrite\s+(a\s+)?program\b",
    r"\bwrite\s+(a\s+)?class\b",
    r"\bwrite\s+(a\s+)?test\b",
    r"\bimplement\b",
    r"\bdebug\b",
    r"\bfix\s+(the\s+)?bug\b",
    r"\brefactor\b",
    r"\bapi\s+endpoint\b",
    r"\bdatabase\b",
    r"\bquery\b",
]

GREETING_PATTERN = re.compile(
    r"^(hey|hi|hello|howdy|good\s+(morning|afternoon|evening|night)|greetings|yo|sup|what'?s\s+up)",
    re.IGNORECASE,
)

EMOJI_PATTERN = re.compile(
    "[\U0001F600-\U0001F64F\U0001F300-\U0001F5FF\U0001F680-\U0001F6FF\u2600-\u26FF]"
)

QUESTION_STARTERS = ("what", "how", "why", "when", "where", "who")

# Greeting-led prompts shorter than this are small talk
GREETING_MAX_TOKENS = 8

MODALITY_ALIASES: Dict[str, Modality] = {
    "text": Modality.TEXT,
    "image": Modality.IMAGE,
    "voice": Modality.VOICE,
    "text+image": Modality.TEXT_IMAGE,
    "textimage": Modality.TEXT_IMAGE,
    "text_image": Modality.TEXT_IMAGE,
    "text+voice": Modality.TEXT_VOICE,
    "textvoice": Modality.TEXT_VOICE,
    "text_voice": Modality.TEXT_VOICE,
}


# =============================================================================
# HELPERS
# =============================================================================

def _count_matches(tokens: set, keywords: frozenset) -> int:
    return len(tokens & keywords)


def _best_of(scores: Dict, default):
    """Key with the strictly highest positive score; first key wins ties."""
    best, best_score = default, 0
    for key, score in scores.items():
        if score > best_score:
            best, best_score = key, score
    return best, best_score


# =============================================================================
# ANALYZER CLASS
# =============================================================================

class TaskAnalyzer:
    """
    Stateless prompt analyzer.

    Usage:
        analyzer = TaskAnalyzer()
        result = analyzer.analyze("Write a Python function to sort an array")
        print(result.intent)      # Intent.CODING
        print(result.complexity)  # Complexity.QUICK
    """

    def __init__(self):
        """Initialize the analyzer."""
        self._compile_patterns()

    def _compile_patterns(self):
        """Compile regex for better performance."""
        self._patterns = {
            "creative": [re.compile(p, re.IGNORECASE) for p in CREATIVE_WRITING_PATTERNS],
            "image": [re.compile(p, re.IGNORECASE) for p in IMAGE_GENERATION_PATTERNS],
            "tech": [re.compile(p, re.IGNORECASE) for p in TECH_CODE_PATTERNS],
        }

    def _matches(self, text: str, group: str) -> bool:
        return any(pattern.search(text) for pattern in self._patterns[group])

    def has_creative_pattern(self, prompt: str) -> bool:
        """Creative-writing phrasing with no technical phrasing."""
        if self._matches(prompt, "tech"):
            return False
        return self._matches(prompt, "creative")

    def has_image_generation_pattern(self, prompt: str) -> bool:
        if self._matches(prompt, "tech"):
            return False
        return self._matches(prompt, "image")

    # -------------------------------------------------------------------------
    # Detectors
    # -------------------------------------------------------------------------

    def detect_intent(self, prompt: str) -> Intent:
        """
        Detect the intent of a prompt.

        Creative and image-generation phrasing override keyword counting.
        Otherwise each intent scores its distinct keyword hits, adjusted for
        creative context and weak coding evidence.
        """
        if self.has_creative_pattern(prompt) or self.has_image_generation_pattern(prompt):
            return Intent.CREATIVE

        token_list = tokenize(prompt)
        tokens = set(token_list)

        scores = {intent: _count_matches(tokens, keywords)
                  for intent, keywords in INTENT_KEYWORDS.items()}

        if tokens & {"write", "writing"} and tokens & CREATIVE_WRITE_TARGETS:
            scores[Intent.CREATIVE] += 5
        if tokens & CREATIVE_CONTEXT_BOOSTERS:
            scores[Intent.CREATIVE] += 3
        if not tokens & CODING_CONTEXT_WORDS:
            scores[Intent.CODING] = max(0, scores[Intent.CODING] - 2)

        best, best_score = _best_of(scores, Intent.CONVERSATION)

        if GREETING_PATTERN.match(prompt.strip()) and len(token_list) < GREETING_MAX_TOKENS:
            return Intent.CONVERSATION

        if best_score == 0:
            lowered = prompt.lower().strip()
            if "?" in lowered or lowered.startswith(QUESTION_STARTERS):
                return Intent.FACTUAL
            return Intent.CONVERSATION

        return best

    def detect_domain(self, prompt: str, intent: Optional[Intent] = None) -> Domain:
        """Detect the subject area, biased toward creative arts for creative work."""
        tokens = set(tokenize(prompt))

        scores = {domain: _count_matches(tokens, keywords)
                  for domain, keywords in DOMAIN_KEYWORDS.items()}

        if intent == Intent.CREATIVE:
            scores[Domain.CREATIVE_ARTS] += 10
            # A robot story is fiction, not engineering
            if tokens & {"ai", "robot", "android"} and scores[Domain.TECHNOLOGY] <= 2:
                scores[Domain.TECHNOLOGY] = 0

        if self.has_creative_pattern(prompt):
            scores[Domain.CREATIVE_ARTS] += 8

        scores[Domain.CREATIVE_ARTS] += 2 * sum(1 for w in CREATIVE_CONTEXT_WORDS if w in tokens)
        scores[Domain.CREATIVE_ARTS] += sum(1 for w in EMOTIONAL_CONCEPTS if w in tokens)

        best, _ = _best_of(scores, Domain.GENERAL)
        return best

    def detect_complexity(self, prompt: str) -> Complexity:
        """
        Estimate how demanding the request is.

        Length and indicator words decide the clear cases; multi-question
        and multi-clause prompts are demanding; the rest is a score race.
        """
        token_list = tokenize(prompt)
        tokens = set(token_list)
        lowered = prompt.lower()

        simple_count = _count_matches(tokens, COMPLEXITY_SIMPLE_INDICATORS)
        demanding_count = _count_matches(tokens, COMPLEXITY_DEMANDING_INDICATORS)
        word_count = len(token_list)

        if word_count < 10 and demanding_count == 0:
            return Complexity.QUICK

        if word_count > 50 and demanding_count >= 2:
            return Complexity.DEMANDING

        question_count = lowered.count("?")
        and_count = len(re.findall(r"\band\b", lowered))
        also_count = len(re.findall(r"\balso\b", lowered))

        if question_count >= 3 or (and_count + also_count) >= 3:
            return Complexity.DEMANDING

        simple_score = simple_count * 2 + (2 if word_count < 20 else 0)
        demanding_score = (demanding_count * 2 + (2 if word_count > 100 else 0)
                           + question_count + and_count + also_count)

        if demanding_score > simple_score + 2:
            return Complexity.DEMANDING
        if simple_score > demanding_score + 2:
            return Complexity.QUICK
        return Complexity.STANDARD

    def detect_tone(self, prompt: str) -> Tone:
        """Detect the writing register from indicator words, punctuation and emoji."""
        tokens = set(tokenize(prompt))
        lowered = prompt.lower()

        scores = {tone: _count_matches(tokens, indicators)
                  for tone, indicators in TONE_INDICATORS.items()}

        if "!!!" in prompt or "???" in prompt or (prompt.isupper() and len(prompt) > 20):
            scores[Tone.FRUSTRATED] += 3

        if any(word in lowered for word in ("asap", "urgent", "immediately", "deadline")):
            scores[Tone.URGENT] += 3

        scores[Tone.PLAYFUL] += len(EMOJI_PATTERN.findall(prompt))

        best, best_score = _best_of(scores, Tone.CASUAL)
        if best_score == 0:
            if any(phrase in lowered for phrase in ("please", "kindly", "would you", "could you")):
                return Tone.PROFESSIONAL
            return Tone.CASUAL
        return best

    def extract_keywords(self, prompt: str, max_keywords: int = 10) -> List[str]:
        return _extract_keywords(prompt, max_keywords)

    # -------------------------------------------------------------------------
    # Full analysis
    # -------------------------------------------------------------------------

    def analyze(
        self,
        prompt: str,
        modality: Union[str, Modality] = Modality.TEXT,
        human_context: Optional['HumanContext'] = None,
    ) -> QueryAnalysis:
        """
        Analyze a prompt.

        Args:
            prompt: User prompt
            modality: Modality or its string form (aliases accepted)
            human_context: Optional human context; only its presence matters here

        Returns:
            QueryAnalysis
        """
        if not isinstance(modality, Modality):
            modality = parse_modality(modality)

        intent = self.detect_intent(prompt)
        analysis = QueryAnalysis(
            intent=intent,
            domain=self.detect_domain(prompt, intent),
            complexity=self.detect_complexity(prompt),
            tone=self.detect_tone(prompt),
            modality=modality,
            keywords=tuple(self.extract_keywords(prompt)),
            human_context_used=has_significant_human_context(human_context),
        )

        logger.debug(
            f"Analysis: intent={analysis.intent.value}, domain={analysis.domain.value}, "
            f"complexity={analysis.complexity.value}, tone={analysis.tone.value}"
        )
        return analysis


# =============================================================================
# MODALITY UTILITIES
# =============================================================================

def parse_modality(value: Optional[str]) -> Modality:
    """Parse a modality string; unknown values fall back to text."""
    normalized = (value or "").strip().lower()
    modality = MODALITY_ALIASES.get(normalized)
    if modality is None:
        logger.debug(f"Unknown modality {value!r}, using text")
        return Modality.TEXT
    return modality


def is_pure_modality(modality: Modality) -> bool:
    return modality in (Modality.IMAGE, Modality.VOICE)


def is_combined_modality(modality: Modality) -> bool:
    return modality in (Modality.TEXT_IMAGE, Modality.TEXT_VOICE)


def get_modality_type(modality: Modality) -> str:
    """Capability a modality needs: "vision", "audio" or "text"."""
    if modality in (Modality.IMAGE, Modality.TEXT_IMAGE):
        return "vision"
    if modality in (Modality.VOICE, Modality.TEXT_VOICE):
        return "audio"
    return "text"


def has_significant_human_context(human_context: Optional['HumanContext']) -> bool:
    """True when the human context carries at least one usable signal."""
    if human_context is None:
        return False
    return human_context.has_signals()


def default_analysis(modality: Modality = Modality.TEXT) -> QueryAnalysis:
    """Neutral analysis used by fallback responses."""
    return QueryAnalysis(
        intent=Intent.CONVERSATION,
        domain=Domain.GENERAL,
        complexity=Complexity.STANDARD,
        tone=Tone.CASUAL,
        modality=modality,
    )


def fast_path_analysis(modality: Modality) -> QueryAnalysis:
    """Fixed analysis for pure image/voice requests (no text to read)."""
    return QueryAnalysis(
        intent=Intent.TASK,
        domain=Domain.GENERAL,
        complexity=Complexity.STANDARD,
        tone=Tone.CASUAL,
        modality=modality,
    )


# =============================================================================
# GLOBAL INSTANCE
# =============================================================================

analyzer = TaskAnalyzer()


def analyze(
    prompt: str,
    modality: Union[str, Modality] = Modality.TEXT,
    human_context: Optional['HumanContext'] = None,
) -> QueryAnalysis:
    """Convenience function to analyze a prompt."""
    return analyzer.analyze(prompt, modality, human_context)


def detect_intent(prompt: str) -> Intent:
    return analyzer.detect_intent(prompt)


def detect_domain(prompt: str, intent: Optional[Intent] = None) -> Domain:
    return analyzer.detect_domain(prompt, intent)


def detect_complexity(prompt: str) -> Complexity:
    return analyzer.detect_complexity(prompt)


def detect_tone(prompt: str) -> Tone:
    return analyzer.detect_tone(prompt)


def extract_keywords(prompt: str, max_keywords: int = 10) -> List[str]:
    return analyzer.extract_keywords(prompt, max_keywords)


# =============================================================================
# TEST CLI
# =============================================================================

if __name__ == "__main__":
    test_cases = [
        "Write a Python function to sort an array",
        "Write a short story about a robot learning to love",
        "Generate an image of a sunset over the ocean",
        "Compare the pros and cons of microservices",
        "What is the capital of France?",
        "hey how are you",
        "Translate this paragraph into Spanish",
        "Summarize this article in three bullet points",
    ]

    print("=" * 60)
    print("ANALYZER TEST")
    print("=" * 60)

    for prompt in test_cases:
        result = analyze(prompt)
        print(f"\n> {prompt}")
        print(f"  Intent:     {result.intent.value}")
        print(f"  Domain:     {result.domain.value}")
        print(f"  Complexity: {result.complexity.value}")
        print(f"  Tone:       {result.tone.value}")
        print(f"  Keywords:   {', '.join(result.keywords)}")
