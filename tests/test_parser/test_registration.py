import logging

from argpars import ArgsParser, ArgumentSpec, HelpInfo, HelpSection


def test_add_argument():
    args = ArgsParser(["prog"])
    args.add_argument("--print-stuff", 'display "stuff"')
    assert args.registry == {
        "--print-stuff": ArgumentSpec("--print-stuff", 'display "stuff"')
    }


def test_add_argument_without_description():
    args = ArgsParser(["prog"])
    args.add_argument("--quiet")
    assert args.registry["--quiet"].description == ""


def test_registration_order_is_preserved():
    args = ArgsParser(["prog"])
    for name in ("--c", "--a", "--b"):
        args.add_argument(name)
    assert list(args.registry) == ["--c", "--a", "--b"]


def test_duplicate_registration_replaces_description_in_place(caplog):
    args = ArgsParser(["prog"])
    args.add_argument("--a", "first")
    args.add_argument("--b", "second")
    with caplog.at_level(logging.WARNING, logger="argpars"):
        args.add_argument("--a", "replaced")
    assert list(args.registry) == ["--a", "--b"]
    assert args.registry["--a"].description == "replaced"
    assert "already registered" in caplog.text


def test_odd_flag_name_is_accepted_with_warning(caplog):
    args = ArgsParser(["prog", "stuff"])
    with caplog.at_level(logging.WARNING, logger="argpars"):
        args.add_argument("stuff", "not a flag")
    assert args.passed("stuff") is True
    assert args.wrong_arguments_passed() is False
    assert "does not start with" in caplog.text


def test_registering_reserved_flag_warns(caplog):
    args = ArgsParser(["prog", "-v"])
    with caplog.at_level(logging.WARNING, logger="argpars"):
        args.add_argument("-v", "verbose")
    assert "shadows a reserved" in caplog.text
    assert args.wrong_arguments_passed() is False


def test_registry_is_a_copy():
    args = ArgsParser(["prog", "--a"])
    registry = args.registry
    registry["--a"] = ArgumentSpec("--a")
    assert args.registry == {}
    assert args.wrong_arguments_passed() is True


def test_add_help_section():
    args = ArgsParser(["prog"])
    args.add_help_section("TEST SECTION:", "  this is a test section!")
    args.add_help_section("SECOND:")
    assert args.help_sections == [
        HelpSection("TEST SECTION:", "  this is a test section!"),
        HelpSection("SECOND:", ""),
    ]


def test_help_info_fields():
    info = HelpInfo(usage="Usage: prog", name="Test App", version="v1.0")
    args = ArgsParser(["prog"], help_info=info)
    assert args.help_usage == "Usage: prog"
    assert args.help_name == "Test App"
    assert args.help_description == ""
    assert args.help_version == "v1.0"


def test_help_info_defaults_to_empty():
    args = ArgsParser(["prog"])
    assert args.help_info == HelpInfo()
    assert (args.help_usage, args.help_name) == ("", "")
    assert (args.help_description, args.help_version) == ("", "")


def test_help_info_replace():
    info = HelpInfo(name="Test App")
    updated = info.replace(version="v2.0")
    assert info.version == ""
    assert updated == HelpInfo(name="Test App", version="v2.0")


def test_str():
    args = ArgsParser(["prog", "--a"])
    args.add_argument("--a")
    assert str(args) == "ArgsParser(args=1, passed=1, default_arguments=True)"
    assert repr(args) == str(args)
