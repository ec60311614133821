from xenochat.persona import PersonaProfile


def test_default_persona():
    persona = PersonaProfile()
    assert persona.name == "Xenochat"
    assert persona.style_tags == ["concise", "helpful"]
    assert persona.guardrails == [
        "Never expose secrets",
        "Avoid unsafe operational advice without warnings",
    ]


def test_default_named_keeps_defaults_but_renames():
    persona = PersonaProfile.default_named("Aria")
    default = PersonaProfile()
    assert persona.name == "Aria"
    assert persona.style_tags == default.style_tags
    assert persona.guardrails == default.guardrails


def test_instances_do_not_share_lists():
    first = PersonaProfile()
    second = PersonaProfile()
    first.style_tags.append("playful")
    assert "playful" not in second.style_tags