"""Dictionary-driven skill extraction.

Pipeline pieces, applied in order by ``skill_intelligence``:
1. N-gram scan of each weighted segment against the alias table
2. Stack/role cluster expansion over the whole text
3. One level of child -> parent inference from the skill graph
4. Ranking and the tools / technical split
"""

import logging
import re
from dataclasses import dataclass

from services.section_parser import TextSegment, segment_sections
from services.skill_taxonomy import (
    AMBIGUOUS_SKILLS,
    CHILD_TO_PARENTS,
    SKILL_ALIASES,
    STACK_CLUSTERS,
    TOOL_SKILLS,
    get_related_skills,
    normalize_skill,
)

logger = logging.getLogger(__name__)

MAX_NGRAM = 4
MIN_PHRASE_LENGTH = 1
NEGATION_WINDOW = 60
CONTEXT_WINDOW = 100

CLUSTER_WEIGHT = 1.5
CLUSTER_BOOST = 0.5
PARENT_WEIGHT = 0.8

# Hyphens, dots, '#', '+' and '/' stay inside tokens (C#, C++, Node.js, CI/CD)
_TOKEN_RE = re.compile(r"[^\s,;|•·▪▫‣()\[\]{}<>]+")
_DIGITS_RE = re.compile(r"^\d+$")

NEGATION_RE = re.compile(
    r"\b(?:no|not|never|lack\s+of|without|excluding|unfamiliar\s+with|"
    r"limited\s+experience\s+in)\b",
    re.IGNORECASE,
)

TECH_CONTEXT_RE = re.compile(
    r"\b(?:(?:programm|develop|engineer|technolog|librar|languag|deploy|statistic)\w*|"
    r"software|code|coding|stacks?|frameworks?|tools?|platforms?|systems?|apps?|apis?|"
    r"databases?|backend|frontend|full[\s-]?stack|devops|cloud|mobile|web|data|"
    r"machine|neural|models?|servers?|client|build|tests?|ci|cd)\b",
    re.IGNORECASE,
)

SOFT_SKILL_PATTERNS: list[tuple[re.Pattern, str]] = [
    (re.compile(r"\b(?:team\s*work|team\s*player|collaborative|collaboration)\b", re.I), "Teamwork"),
    (re.compile(r"\b(?:leadership|led\s+(?:a\s+)?team|team\s+lead|mentor(?:ing|ed)?)\b", re.I), "Leadership"),
    (re.compile(r"\bcommunicat(?:ion|ions|ed|e|ing)\b", re.I), "Communication"),
    (re.compile(r"\b(?:problem[\s-]?solving|troubleshoot\w*|debugging|root\s+cause)\b", re.I), "Problem Solving"),
    (re.compile(r"\b(?:project\s+management|managed\s+projects?|end[\s-]to[\s-]end)\b", re.I), "Project Management"),
    (re.compile(r"\b(?:agile|scrum|kanban|sprints?|stand[\s-]?ups?)\b", re.I), "Agile"),
    (re.compile(r"\b(?:critical\s+thinking|analytical|analysis)\b", re.I), "Analytical Thinking"),
    (re.compile(r"\b(?:time\s+management|deadlines?|prioriti[sz]\w*)\b", re.I), "Time Management"),
]


@dataclass
class SkillCandidate:
    canonical: str
    weight: float = 0.0
    count: int = 0
    inferred: bool = False

    def add_occurrence(self, weight: float) -> None:
        self.weight += weight
        self.count += 1

    def boost(self, amount: float) -> None:
        self.weight += amount

    @property
    def score(self) -> float:
        return self.weight * self.count


def _is_negated(line: str, start: int) -> bool:
    """True if a negation cue sits in the window before ``start`` on this line."""
    prefix = line[max(0, start - NEGATION_WINDOW):start]
    return NEGATION_RE.search(prefix) is not None


def _has_tech_context(text: str, start: int, end: int) -> bool:
    context = text[max(0, start - CONTEXT_WINDOW):end + CONTEXT_WINDOW]
    return TECH_CONTEXT_RE.search(context) is not None


def _tokenize(line: str) -> list[tuple[str, int, int]]:
    tokens = []
    for match in _TOKEN_RE.finditer(line):
        word = match.group().rstrip(".:")
        if word:
            tokens.append((word, match.start(), match.start() + len(word)))
    return tokens


def extract_skill_candidates(segments: list[TextSegment]) -> dict[str, SkillCandidate]:
    """Scan 1-4 token phrases of every segment line against the alias table.

    Each accepted mention adds the segment weight and one occurrence to its
    canonical candidate. Negated mentions, and ambiguous short tokens without
    technical context nearby, are skipped.
    """
    candidates: dict[str, SkillCandidate] = {}

    for segment in segments:
        seg_text = segment.text
        line_offset = 0
        for line in segment.lines:
            tokens = _tokenize(line)
            for i in range(len(tokens)):
                for n in range(1, MAX_NGRAM + 1):
                    if i + n > len(tokens):
                        break
                    phrase = " ".join(t[0] for t in tokens[i:i + n]).lower()
                    if len(phrase) < MIN_PHRASE_LENGTH or _DIGITS_RE.match(phrase):
                        continue

                    canonical = SKILL_ALIASES.get(phrase)
                    if canonical is None:
                        continue

                    start, end = tokens[i][1], tokens[i + n - 1][2]
                    if _is_negated(line, start):
                        continue
                    if phrase in AMBIGUOUS_SKILLS and not _has_tech_context(
                        seg_text, line_offset + start, line_offset + end
                    ):
                        continue

                    candidate = candidates.get(canonical)
                    if candidate is None:
                        candidate = candidates[canonical] = SkillCandidate(canonical)
                    candidate.add_occurrence(segment.weight)
            line_offset += len(line) + 1

    return candidates


def expand_stack_clusters(text: str, candidates: dict[str, SkillCandidate]) -> None:
    """Add skills implied by stack or role phrases found anywhere in ``text``.

    Matching is a plain lowercase substring search, so short keys can fire
    inside unrelated words.
    """
    text_lower = text.lower()
    for cluster, skills in STACK_CLUSTERS.items():
        if cluster not in text_lower:
            continue
        for skill in skills:
            canonical = normalize_skill(skill)
            existing = candidates.get(canonical)
            if existing is None:
                candidates[canonical] = SkillCandidate(
                    canonical, weight=CLUSTER_WEIGHT, count=1, inferred=True
                )
            else:
                existing.boost(CLUSTER_BOOST)


def infer_parent_skills(candidates: dict[str, SkillCandidate]) -> None:
    """Add missing parents of every candidate (one level, not transitive)."""
    for canonical in list(candidates):
        for parent in CHILD_TO_PARENTS.get(canonical, ()):
            if parent not in candidates:
                candidates[parent] = SkillCandidate(
                    parent, weight=PARENT_WEIGHT, count=1, inferred=True
                )


def classify_skills(candidates: dict[str, SkillCandidate]) -> tuple[list[str], list[str]]:
    """Rank candidates and split them into (technical, tools).

    Explicit mentions come before inferred ones, then by weight times count.
    """
    ranked = sorted(candidates.values(), key=lambda c: (c.inferred, -c.score))
    technical: list[str] = []
    tools: list[str] = []
    for candidate in ranked:
        if candidate.canonical in TOOL_SKILLS:
            tools.append(candidate.canonical)
        else:
            technical.append(candidate.canonical)
    return technical, tools


def cap_with_parents(ranked: list[str], limit: int) -> list[str]:
    """Keep at most ``limit`` skills in rank order without orphaning a child.

    A skill is kept only if its parents from ``ranked`` fit alongside it;
    otherwise it is skipped and lower-ranked skills get the slot.
    """
    rank_of = {skill: i for i, skill in enumerate(ranked)}
    chosen: set[str] = set()
    for skill in ranked:
        if len(chosen) >= limit:
            break
        if skill in chosen:
            continue
        needed = {skill}
        needed.update(p for p in CHILD_TO_PARENTS.get(skill, ()) if p in rank_of)
        needed -= chosen
        if len(chosen) + len(needed) <= limit:
            chosen |= needed
    return sorted(chosen, key=rank_of.__getitem__)


def extract_soft_skills(text: str) -> list[str]:
    found: list[str] = []
    for pattern, label in SOFT_SKILL_PATTERNS:
        if label not in found and pattern.search(text):
            found.append(label)
    return found


def extract_skill_names(text: str) -> set[str]:
    """Canonical names of the skills explicitly mentioned in ``text``."""
    return set(extract_skill_candidates(segment_sections(text)))


def compute_skill_overlap(
    candidate_skills: set[str],
    job_skills: set[str],
) -> tuple[float, list[str]]:
    """Weighted fraction of ``job_skills`` covered by the candidate.

    Full credit for a direct match, half credit when the job skill is only
    implied (a parent of something the candidate knows, or a child that a
    known skill grants partial credit toward).

    Returns (ratio, matched job skills). No job skills gives a neutral 0.5.
    """
    if not job_skills:
        return 0.5, []

    direct = {normalize_skill(s).lower() for s in candidate_skills}
    implied: set[str] = set()
    for skill in candidate_skills:
        canonical = normalize_skill(skill)
        implied.update(p.lower() for p in CHILD_TO_PARENTS.get(canonical, ()))
        implied.update(c.lower() for c in get_related_skills(canonical))

    earned = 0.0
    matched: list[str] = []
    for skill in sorted(job_skills):
        key = normalize_skill(skill).lower()
        if key in direct:
            earned += 1.0
            matched.append(skill)
        elif key in implied:
            earned += 0.5
            matched.append(skill)

    return earned / len(job_skills), matched
