from edupilot.llm.parsers import parse_career_roles


def test_parse_strips_label_prefixes() -> None:
    roles = parse_career_roles(
        "Title: UX Designer\n"
        "Description: Shapes how products feel to use.\n"
        "Time to Proficiency: 1 year\n"
        "Link to Study Materials: https://www.interaction-design.org"
    )

    assert len(roles) == 1
    assert roles[0].title == "UX Designer"
    assert roles[0].description == "Shapes how products feel to use."
    assert roles[0].time_to_complete == "1 year"
    assert roles[0].URL == "https://www.interaction-design.org"


def test_parse_ignores_surrounding_whitespace() -> None:
    roles = parse_career_roles(
        "\n\n  Title: Nurse  \nDescription: Cares for patients.\nTime to Proficiency: 3 years\n"
        "Link to Study Materials: https://www.khanacademy.org\n\n"
    )

    assert [role.title for role in roles] == ["Nurse"]


def test_parse_three_line_block_has_empty_url() -> None:
    roles = parse_career_roles(
        "Title: Chef\nDescription: Runs a kitchen.\nTime to Proficiency: 4 years"
    )

    assert len(roles) == 1
    assert roles[0].URL == ""


def test_parse_drops_blocks_shorter_than_three_lines() -> None:
    roles = parse_career_roles(
        "Sure! Here are three roles.\n\n"
        "Title: Chef\nDescription: Runs a kitchen.\nTime to Proficiency: 4 years\n"
        "Link to Study Materials: https://www.bbcgoodfood.com\n\n"
        "Title: Baker\nDescription: Bakes bread."
    )

    assert [role.title for role in roles] == ["Chef"]


def test_parse_keeps_lines_without_labels_as_is() -> None:
    roles = parse_career_roles(
        "1. Title: Architect\n- Designs buildings.\nAbout 5 years\nhttps://ocw.mit.edu"
    )

    assert roles[0].title == "1. Architect"
    assert roles[0].description == "- Designs buildings."
    assert roles[0].time_to_complete == "About 5 years"
    assert roles[0].URL == "https://ocw.mit.edu"


def test_parse_only_uses_first_four_lines_of_a_block() -> None:
    roles = parse_career_roles(
        "Title: Pilot\nDescription: Flies aircraft.\nTime to Proficiency: 2 years\n"
        "Link to Study Materials: https://www.faa.gov\nExtra commentary line"
    )

    assert roles[0].URL == "https://www.faa.gov"


def test_parse_empty_text_returns_no_roles() -> None:
    assert parse_career_roles("") == []
