"""Resume section segmentation and structured field extraction.

Everything here is deterministic regex work over plain text: weighted
section segments, contact details, experience, education and
certifications.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime

# Section header patterns and their canonical names (checked in order)
SECTION_PATTERNS: dict[str, list[str]] = {
    "skills": [
        r"(?:technical\s+)?skills?",
        r"(?:core\s+)?competencies",
        r"technologies(?:\s+used)?",
        r"tools?(?:\s+and\s+technologies?)?",
        r"tech(?:nical)?\s*(?:stack|expertise)",
        r"what\s+i\s+(?:know|use)",
    ],
    "experience": [
        r"(?:work\s+)?(?:experience|history|background|employment)",
        r"professional\s+(?:experience|background|history)",
        r"career\s+(?:history|background)",
    ],
    "projects": [
        r"(?:personal\s+|side\s+|open[\s-]?source\s+|key\s+)?projects?",
        r"portfolio",
        r"selected\s+work",
    ],
    "summary": [
        r"(?:professional\s+)?(?:summary|profile|objective|about(?:\s+me)?|overview|introduction|bio)",
    ],
    "certifications": [
        r"certifications?",
        r"licen[sc]es?\s*(?:and\s+certifications?)?",
        r"credentials",
    ],
    "education": [
        r"education(?:al\s+(?:background|history))?",
        r"academic\s+(?:background|history|qualifications?)",
    ],
}

_COMPILED: dict[str, re.Pattern] = {}
for _section, _patterns in SECTION_PATTERNS.items():
    _combined = "|".join(_patterns)
    _COMPILED[_section] = re.compile(rf"^(?:{_combined})\s*:?\s*$", re.IGNORECASE)

# Relative importance of a skill mention by the section it appears in
SECTION_WEIGHTS: dict[str, float] = {
    "skills": 3.0,
    "certifications": 2.5,
    "projects": 1.8,
    "experience": 1.6,
    "summary": 1.3,
    "education": 0.7,
    "unknown": 1.0,
}

# Short ALL-CAPS lines are treated as headers we don't recognise
_CAPS_HEADER_RE = re.compile(r"^[A-Z][A-Z\s&/]{2,30}$")


@dataclass
class TextSegment:
    section: str
    lines: list[str] = field(default_factory=list)
    weight: float = SECTION_WEIGHTS["unknown"]

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def match_section_header(line: str) -> str | None:
    """Return the canonical section name if ``line`` is a known header."""
    stripped = line.strip()
    for section, pattern in _COMPILED.items():
        if pattern.match(stripped):
            return section
    return None


def segment_sections(text: str) -> list[TextSegment]:
    """Split resume text into weighted segments.

    Text before the first header lands in an ``unknown`` segment. Blank lines
    are skipped and segments without content are dropped.
    """
    segments: list[TextSegment] = []
    current = TextSegment("unknown")

    for raw_line in text.split("\n"):
        line = raw_line.strip()
        if not line:
            continue

        section = match_section_header(line)
        if section is not None:
            if current.lines:
                segments.append(current)
            current = TextSegment(section, weight=SECTION_WEIGHTS[section])
        elif _CAPS_HEADER_RE.match(line) and len(line) < 35:
            if current.lines:
                segments.append(current)
            current = TextSegment("unknown")
        else:
            current.lines.append(line)

    if current.lines:
        segments.append(current)
    return segments


def find_segment(segments: list[TextSegment], section: str) -> TextSegment | None:
    for segment in segments:
        if segment.section == section:
            return segment
    return None


# ---------------------------------------------------------------------------
# Personal info
# ---------------------------------------------------------------------------

EMAIL_RE = re.compile(r"[\w.+-]+@[\w-]+\.[a-zA-Z]{2,}")
PHONE_RE = re.compile(r"(?<!\d)(?:\+?1[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}(?!\d)")
LINKEDIN_RE = re.compile(r"linkedin\.com/in/([\w-]+)", re.IGNORECASE)
GITHUB_RE = re.compile(r"github\.com/([\w-]+)", re.IGNORECASE)
WEBSITE_RE = re.compile(
    r"https?://(?!(?:www\.)?(?:linkedin|github)\b)[\w.-]+\.(?:io|com|dev|me|co|net)(?:/[\w.-]*)*",
    re.IGNORECASE,
)
LOCATION_RE = re.compile(r"\b[A-Z][a-zA-Z]+(?:[ \t][A-Z][a-zA-Z]+)*,[ \t]*[A-Z]{2}\b")

_NAME_RE = re.compile(r"^(?:[A-Z][a-zA-Z'-]{1,20}\s){1,3}[A-Z][a-zA-Z'-]{1,20}$")
_CONTACT_NOISE_RE = re.compile(r"[@\d|()•\\]|linkedin|github|http|\.com|\.edu|\.org", re.IGNORECASE)
_JOB_TITLE_WORDS_RE = re.compile(
    r"\b(?:engineer|developer|manager|analyst|designer|consultant|director|"
    r"architect|intern|associate|lead|senior|junior|staff|resume|cv)\b",
    re.IGNORECASE,
)


def _extract_name(lines: list[str]) -> str | None:
    head = [line.strip() for line in lines if line.strip()][:10]
    for line in head:
        if _CONTACT_NOISE_RE.search(line) or _JOB_TITLE_WORDS_RE.search(line):
            continue
        if match_section_header(line) is not None:
            continue
        if _NAME_RE.match(line):
            return line
    return None


def extract_personal_info(text: str) -> dict[str, str | None]:
    """Extract identity and contact fields from resume text.

    Profile URLs are normalized to ``https://linkedin.com/in/<handle>`` and
    ``https://github.com/<handle>``. Location is only looked for in the
    first 20 lines, where resumes carry their header.
    """
    lines = text.split("\n")

    email_match = EMAIL_RE.search(text)
    phone_match = PHONE_RE.search(text)
    linkedin_match = LINKEDIN_RE.search(text)
    github_match = GITHUB_RE.search(text)
    website_match = WEBSITE_RE.search(text)
    location_match = LOCATION_RE.search("\n".join(lines[:20]))

    return {
        "name": _extract_name(lines),
        "email": email_match.group() if email_match else None,
        "phone": phone_match.group().strip() if phone_match else None,
        "location": location_match.group() if location_match else None,
        "linkedin": f"https://linkedin.com/in/{linkedin_match.group(1)}" if linkedin_match else None,
        "github": f"https://github.com/{github_match.group(1)}" if github_match else None,
        "website": website_match.group() if website_match else None,
    }


# ---------------------------------------------------------------------------
# Experience: years, seniority level, positions
# ---------------------------------------------------------------------------

# "5+ years of experience", "3 years exp", "10 years work"
EXPLICIT_YEARS_RE = re.compile(
    r"(\d+)\+?\s*years?\s*(?:of\s+)?(?:experience|exp|work)",
    re.IGNORECASE,
)
YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")

_MONTH = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|"
    r"Jul(?:y)?|Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)\.?"
)
DATE_RANGE_RE = re.compile(
    rf"(?:{_MONTH}\s*)?(?<!\d)(?:19|20)\d{{2}}\s*(?:-|–|—|\bto\b)\s*"
    rf"(?:present|current|now|(?:{_MONTH}\s*)?(?:19|20)\d{{2}}(?!\d))",
    re.IGNORECASE,
)
_OPEN_ENDED_RE = re.compile(
    r"(?:19|20)\d{2}\s*(?:-|–|—|\bto\b)\s*(?:present|current|now)\b", re.IGNORECASE
)

# Ordered: the first family that matches anywhere in the text wins
LEVEL_PATTERNS: list[tuple[str, re.Pattern]] = [
    ("executive", re.compile(
        r"\b(?:director|vp|vice\s+president|head\s+of|cto|cpo|ceo|coo|chief|"
        r"founder|co[\s-]?founder|president)\b", re.IGNORECASE)),
    ("senior", re.compile(
        r"\b(?:senior|sr\.?|lead|principal|staff\s+(?:engineer|developer)|"
        r"architect|tech\s+lead)\b", re.IGNORECASE)),
    ("mid", re.compile(
        r"\b(?:mid[\s-]level|software\s+(?:engineer|developer)|"
        r"full[\s-]?stack\s+(?:engineer|developer)|backend\s+(?:engineer|developer)|"
        r"frontend\s+(?:engineer|developer))\b", re.IGNORECASE)),
    ("entry", re.compile(
        r"\b(?:junior|jr\.?|associate|entry[\s-]?level|intern|graduate|trainee|"
        r"apprentice|fresh(?:er|man|graduate)?)\b", re.IGNORECASE)),
]

MAX_POSITIONS = 8
_TITLE_COMPANY_SPLIT_RE = re.compile(r"\s{2,}|,\s*|\s+[-–—@|]\s+|\s+at\s+")
_BULLET_CHARS = "•-*▪‣·◦"


@dataclass
class ExperienceInfo:
    level: str = "mid"
    total_years: float = 0.0
    positions: list[dict] = field(default_factory=list)


def estimate_years_from_dates(text: str, current_year: int | None = None) -> float:
    """Span between the earliest and latest year seen, capped at 40.

    An open-ended range ("2019 - Present") counts the current year as seen.
    """
    years = [int(y) for y in YEAR_RE.findall(text)]
    if _OPEN_ENDED_RE.search(text):
        years.append(current_year or datetime.now().year)
    if len(years) < 2:
        return 0.0
    return float(min(max(years) - min(years), 40))


def detect_level(text: str) -> str:
    for level, pattern in LEVEL_PATTERNS:
        if pattern.search(text):
            return level
    return "mid"


def level_from_years(years: float) -> str:
    # 10+ years stays in the senior tier; there is no numeric tier above it
    if years >= 5:
        return "senior"
    if years >= 2:
        return "mid"
    return "entry"


def _clean_part(part: str) -> str:
    return part.strip(" \t-–—,|@")


def _split_title_company(header: str) -> tuple[str, str]:
    parts = [_clean_part(p) for p in _TITLE_COMPANY_SPLIT_RE.split(header)]
    parts = [p for p in parts if p]
    title = parts[0] if parts else "Unknown Role"
    company = parts[1] if len(parts) > 1 else ""
    return title, company


def _strip_bullet(line: str) -> str:
    return line.lstrip(_BULLET_CHARS + " \t").strip()


def _is_date_only(line: str) -> bool:
    date_match = DATE_RANGE_RE.search(line)
    if not date_match:
        return False
    return not _clean_part(re.sub(r"[|•·()]", " ", line.replace(date_match.group(), " ")))


def parse_positions(lines: list[str]) -> list[dict]:
    """Parse job entries out of experience-section lines.

    A line carrying a date range opens a position. The rest of that line is
    split into title and company; when the date sits on a line of its own
    the preceding line is used instead.
    """
    lines = [line.strip() for line in lines if line.strip()]
    positions: list[dict] = []

    for i, line in enumerate(lines):
        date_match = DATE_RANGE_RE.search(line)
        if not date_match:
            continue

        header = line.replace(date_match.group(), " ")
        header = re.sub(r"[|•·()]", " ", header)
        if not _clean_part(header) and i > 0 and not DATE_RANGE_RE.search(lines[i - 1]):
            header = _strip_bullet(lines[i - 1])
        title, company = _split_title_company(header)

        responsibilities: list[str] = []
        for j in range(i + 1, min(i + 4, len(lines))):
            candidate = lines[j]
            # Stop at the next position, whether dated inline or on the line below
            if DATE_RANGE_RE.search(candidate):
                break
            if j + 1 < len(lines) and _is_date_only(lines[j + 1]):
                break
            if candidate[0] in _BULLET_CHARS or len(candidate) > 20:
                responsibility = _strip_bullet(candidate)
                if responsibility:
                    responsibilities.append(responsibility)

        positions.append({
            "title": title,
            "company": company,
            "duration": date_match.group().strip(),
            "responsibilities": responsibilities,
        })
        if len(positions) >= MAX_POSITIONS:
            break

    return positions


def extract_experience(
    text: str, segments: list[TextSegment], current_year: int | None = None
) -> ExperienceInfo:
    """Derive seniority level, total years and positions.

    An explicit "N years of experience" claim (largest one wins) takes
    precedence over the date-span estimate and also decides the level.
    Without one, the level comes from keyword families in the text.
    """
    claims = [int(m.group(1)) for m in EXPLICIT_YEARS_RE.finditer(text)]

    if claims:
        total_years = float(max(claims))
        level = level_from_years(total_years)
    else:
        total_years = estimate_years_from_dates(text, current_year)
        level = detect_level(text)

    exp_segment = find_segment(segments, "experience")
    positions = parse_positions(exp_segment.lines) if exp_segment else []

    return ExperienceInfo(level=level, total_years=total_years, positions=positions)


# ---------------------------------------------------------------------------
# Education
# ---------------------------------------------------------------------------

DEGREE_RE = re.compile(
    r"\b(?:ph\.?d\.?|doctor(?:ate)?|master'?s?|m\.?s\.?|m\.?a\.?|mba|msc|"
    r"bachelor'?s?|b\.?s\.?|b\.?a\.?|bsc|associate'?s?|diploma|certificate)(?![a-z])",
    re.IGNORECASE,
)
MAX_EDUCATION = 4


def _clean_institution(text: str) -> str:
    text = YEAR_RE.sub(" ", text)
    text = re.sub(r"\s+", " ", text)
    return text.strip(" \t,-–—|()")


def extract_education(segments: list[TextSegment]) -> list[dict]:
    """Pull degree entries from the education segment."""
    edu_segment = find_segment(segments, "education")
    if edu_segment is None:
        return []

    lines = [line.strip() for line in edu_segment.lines if line.strip()]
    results: list[dict] = []

    for i, line in enumerate(lines):
        degree_match = DEGREE_RE.search(line)
        if not degree_match:
            continue
        next_line = lines[i + 1] if i + 1 < len(lines) else ""

        institution = _clean_institution(line.replace(degree_match.group(), " ", 1))
        if not institution:
            institution = _clean_institution(next_line)

        year_match = YEAR_RE.search(line) or YEAR_RE.search(next_line)
        results.append({
            "degree": degree_match.group(),
            "institution": institution,
            "year": year_match.group() if year_match else None,
        })
        if len(results) >= MAX_EDUCATION:
            break

    return results


# ---------------------------------------------------------------------------
# Certifications
# ---------------------------------------------------------------------------

# Capitalized words following a certification prefix form its name
_CERT_TAIL = r"(?:[ \t]+[A-Z][\w+-]*){1,5}"

CERT_PATTERNS: list[re.Pattern] = [
    re.compile(rf"\b(?i:aws[ \t]+certified){_CERT_TAIL}"),
    re.compile(rf"\b(?i:google[ \t]+(?:cloud|professional)){_CERT_TAIL}"),
    re.compile(rf"\b(?i:microsoft[ \t]+certified):?{_CERT_TAIL}"),
    re.compile(
        r"\b(?i:certified[ \t]+(?:kubernetes|scrum|safe|aws|gcp|azure|data|cloud)[\w-]*)"
        r"(?:[ \t]+[A-Z][\w+-]*){0,4}"
    ),
    re.compile(r"\b(?:PMP|CISSP|CEH|CISM|CISA|CCNA|CCNP|RHCE|LPIC|CKAD|CKA)\b|\bCompTIA[ \t]+[\w+]+", re.IGNORECASE),
    re.compile(r"\btensorflow[ \t]+developer[ \t]+certificate\b", re.IGNORECASE),
    re.compile(rf"\b(?i:oracle[ \t]+certified){_CERT_TAIL}"),
]
MAX_CERTIFICATIONS = 10


def extract_certifications(text: str) -> list[str]:
    """Match known certification names, deduplicated in discovery order.

    A match already contained in a longer certification found earlier is
    dropped ("Certified Cloud Practitioner" inside "AWS Certified Cloud
    Practitioner").
    """
    found: list[str] = []
    for pattern in CERT_PATTERNS:
        for match in pattern.finditer(text):
            cert = re.sub(r"\s+", " ", match.group().strip())
            contained = re.compile(rf"(?<!\w){re.escape(cert)}(?!\w)", re.IGNORECASE)
            if any(contained.search(existing) for existing in found):
                continue
            found.append(cert)
    return found[:MAX_CERTIFICATIONS]
