from services.section_parser import (
    SECTION_WEIGHTS,
    detect_level,
    estimate_years_from_dates,
    extract_certifications,
    extract_education,
    extract_experience,
    extract_personal_info,
    level_from_years,
    parse_positions,
    segment_sections,
)


SAMPLE_RESUME = """Jane Doe
jane.doe@email.com | (555) 123-4567
San Francisco, CA
linkedin.com/in/janedoe | github.com/janedoe | https://janedoe.dev

Summary
Backend developer focused on APIs and data pipelines.

Experience
Software Engineer, Acme Corp    Jan 2020 - Present
• Built REST APIs in Python serving 1M requests/day
• Migrated batch jobs to Apache Airflow

Data Analyst - Initech
2017 - 2019
• Maintained SQL reporting for finance

Education
B.S. Computer Science, State University, 2017

Skills
Python, Django, PostgreSQL, Docker

Certifications
AWS Certified Solutions Architect
Certified Kubernetes Administrator (CKA)
"""


def test_segment_sections_finds_known_headers():
    segments = segment_sections(SAMPLE_RESUME)
    sections = [s.section for s in segments]
    assert sections == ["unknown", "summary", "experience", "education", "skills", "certifications"]


def test_segment_weights_follow_section():
    segments = {s.section: s for s in segment_sections(SAMPLE_RESUME)}
    assert segments["skills"].weight == SECTION_WEIGHTS["skills"] == 3.0
    assert segments["education"].weight == 0.7
    assert segments["unknown"].weight == 1.0


def test_segment_headers_with_colon_and_case():
    segments = segment_sections("TECHNICAL SKILLS:\nPython\nwork experience\nDid things")
    assert [s.section for s in segments] == ["skills", "experience"]


def test_unrecognised_caps_line_opens_unknown_segment():
    segments = segment_sections("Skills\nPython\nVOLUNTEER WORK\nFood bank helper")
    assert [s.section for s in segments] == ["skills", "unknown"]
    assert segments[1].lines == ["Food bank helper"]


def test_segment_sections_drops_blank_and_empty():
    assert segment_sections("") == []
    assert segment_sections("\n\n   \n") == []
    segments = segment_sections("Skills\n\nEducation\nBS Biology")
    assert [s.section for s in segments] == ["education"]


def test_extract_personal_info():
    info = extract_personal_info(SAMPLE_RESUME)
    assert info["name"] == "Jane Doe"
    assert info["email"] == "jane.doe@email.com"
    assert info["phone"] == "(555) 123-4567"
    assert info["location"] == "San Francisco, CA"
    assert info["linkedin"] == "https://linkedin.com/in/janedoe"
    assert info["github"] == "https://github.com/janedoe"
    assert info["website"] == "https://janedoe.dev"


def test_personal_info_skips_title_lines_for_name():
    text = "Senior Software Engineer\nProfessional Summary\nJohn Smith\njohn@x.io"
    assert extract_personal_info(text)["name"] == "John Smith"


def test_personal_info_empty():
    info = extract_personal_info("")
    assert all(value is None for value in info.values())


def test_website_excludes_profile_sites():
    info = extract_personal_info("https://www.linkedin.com/in/someone")
    assert info["website"] is None
    assert info["linkedin"] == "https://linkedin.com/in/someone"


def test_parse_positions_inline_and_own_line_dates():
    segments = {s.section: s for s in segment_sections(SAMPLE_RESUME)}
    positions = parse_positions(segments["experience"].lines)
    assert len(positions) == 2

    first, second = positions
    assert first["title"] == "Software Engineer"
    assert first["company"] == "Acme Corp"
    assert first["duration"] == "Jan 2020 - Present"
    assert first["responsibilities"][0].startswith("Built REST APIs")

    assert second["title"] == "Data Analyst"
    assert second["company"] == "Initech"
    assert second["duration"] == "2017 - 2019"
    assert second["responsibilities"] == ["Maintained SQL reporting for finance"]


def test_parse_positions_caps_at_eight():
    lines = [f"Role {i} at Company {i} 2010 - 2011" for i in range(12)]
    assert len(parse_positions(lines)) == 8


def test_parse_positions_keeps_hyphenated_titles():
    positions = parse_positions(["Full-Stack Developer, Globex 2018 - 2020"])
    assert positions[0]["title"] == "Full-Stack Developer"
    assert positions[0]["company"] == "Globex"


def test_explicit_years_override_level():
    segments = segment_sections("Director of Engineering\n3 years of experience")
    info = extract_experience("Director of Engineering\n3 years of experience", segments)
    assert info.total_years == 3
    assert info.level == "mid"


def test_largest_explicit_claim_wins():
    text = "2 years experience with Go. 7+ years of experience overall."
    info = extract_experience(text, segment_sections(text))
    assert info.total_years == 7
    assert info.level == "senior"


def test_years_estimated_from_dates_without_claim():
    text = "Worked 2012 - 2016 and 2016 - 2021"
    info = extract_experience(text, segment_sections(text))
    assert info.total_years == 9
    assert info.level == "mid"


def test_estimate_years_caps_at_forty():
    assert estimate_years_from_dates("1950 and 2020") == 40


def test_estimate_years_counts_open_ended_range():
    assert estimate_years_from_dates("2019 - Present", current_year=2024) == 5


def test_estimate_years_needs_two_years():
    assert estimate_years_from_dates("Class of 2015") == 0
    assert estimate_years_from_dates("") == 0


def test_level_keyword_families_in_order():
    assert detect_level("VP of Product, formerly senior engineer") == "executive"
    assert detect_level("Senior Backend Engineer") == "senior"
    assert detect_level("Backend developer") == "mid"
    assert detect_level("Junior analyst intern") == "entry"
    assert detect_level("Dog walker") == "mid"


def test_level_from_years_flat_top_tier():
    assert level_from_years(15) == "senior"
    assert level_from_years(5) == "senior"
    assert level_from_years(4) == "mid"
    assert level_from_years(2) == "mid"
    assert level_from_years(1) == "entry"


def test_extract_education():
    entries = extract_education(segment_sections(SAMPLE_RESUME))
    assert len(entries) == 1
    assert entries[0]["degree"] == "B.S."
    assert entries[0]["institution"] == "Computer Science, State University"
    assert entries[0]["year"] == "2017"


def test_education_institution_and_year_from_next_line():
    text = "Education\nBachelor's\nOhio State University 2015"
    entries = extract_education(segment_sections(text))
    assert entries[0]["degree"] == "Bachelor's"
    assert entries[0]["institution"] == "Ohio State University"
    assert entries[0]["year"] == "2015"


def test_education_prefers_year_on_same_line():
    text = "Education\nMBA, Wharton School 2012\nExchange term 2011"
    entries = extract_education(segment_sections(text))
    assert entries[0]["degree"] == "MBA"
    assert entries[0]["institution"] == "Wharton School"
    assert entries[0]["year"] == "2012"


def test_education_requires_segment():
    assert extract_education(segment_sections("BS Biology 2010")) == []


def test_extract_certifications():
    certs = extract_certifications(SAMPLE_RESUME)
    assert "AWS Certified Solutions Architect" in certs
    assert "Certified Kubernetes Administrator" in certs
    assert "CKA" in certs


def test_certifications_drop_contained_duplicates():
    certs = extract_certifications("AWS Certified Cloud Practitioner\nAWS Certified Cloud Practitioner")
    assert certs == ["AWS Certified Cloud Practitioner"]


def test_certification_acronyms():
    certs = extract_certifications("Holds PMP, CISSP and CKAD. CompTIA Security+")
    assert "PMP" in certs
    assert "CISSP" in certs
    assert "CKAD" in certs
    assert "CompTIA Security+" in certs


def test_certifications_capped_at_ten():
    text = " ".join(["PMP", "CISSP", "CEH", "CISM", "CISA", "CCNA", "CCNP", "RHCE", "LPIC", "CKAD", "CKA"])
    assert len(extract_certifications(text)) == 10
