import pytest

from maajwtcheck.context import Context, always_log, current, log, usage


@pytest.fixture
def shared():
    ctx = current()
    ctx.reset()
    yield ctx
    ctx.reset()


def test_defaults():
    ctx = Context()
    assert ctx.verbose is False
    assert ctx.jwt_filename == ""
    assert ctx.debuggable == -1


def test_filename_and_verbose():
    ctx = Context()
    ctx.set(["prog", "-v", "token.jwt"])
    assert ctx.verbose is True
    assert ctx.jwt_filename == "token.jwt"


def test_value_options_case_insensitive():
    ctx = Context()
    ctx.set(["prog", "-MRSIGNER", "abc", "-mrenclave", "def",
             "-ProductId", "7", "-svn", "2", "file.jwt"])
    assert ctx.mrsigner == "abc"
    assert ctx.mrenclave == "def"
    assert ctx.productid == "7"
    assert ctx.svn == "2"
    assert ctx.jwt_filename == "file.jwt"


def test_filename_keeps_its_case():
    ctx = Context()
    ctx.set(["prog", "Token.JWT"])
    assert ctx.jwt_filename == "Token.JWT"


def test_debuggable_flag():
    ctx = Context()
    ctx.set(["prog", "-isdebuggable", "true", "f"])
    assert ctx.debuggable == 1
    ctx.set(["prog", "-isdebuggable", "", "f"])
    assert ctx.debuggable == 0


def test_set_resets_previous_values():
    ctx = Context()
    ctx.set(["prog", "--verbose", "-svn", "5", "a"])
    ctx.set(["prog", "b"])
    assert ctx.verbose is False
    assert ctx.svn == ""
    assert ctx.jwt_filename == "b"


@pytest.mark.parametrize(
    "args",
    [
        ["prog"],
        ["prog", "-h"],
        ["prog", "--HELP"],
        ["prog", "a", "b"],
        ["prog", "file", "-svn"],
    ],
)
def test_help_exits_successfully(args, capsys):
    with pytest.raises(SystemExit) as info:
        Context().set(args)
    assert info.value.code == 0
    assert "Usage: maavalidatejwt [options] file" in capsys.readouterr().out


def test_usage_lists_options():
    text = usage()
    for option in ("-mrsigner", "-mrenclave", "-productid", "-svn",
                   "-isdebuggable", "--verbose", "--help"):
        assert option in text


def test_dump_only_when_verbose(capsys):
    ctx = Context()
    ctx.set(["prog", "x.jwt"])
    ctx.dump()
    assert capsys.readouterr().out == ""
    ctx.set(["prog", "-v", "x.jwt"])
    ctx.dump()
    out = capsys.readouterr().out
    assert "Arguments for this run:" in out
    assert "x.jwt" in out


def test_log_respects_verbosity(shared, capsys):
    log("hidden")
    assert capsys.readouterr().out == ""
    shared.verbose = True
    log("shown")
    assert capsys.readouterr().out == "\t---\tshown\n"


def test_always_log(shared, capsys):
    always_log("ERROR - something")
    assert capsys.readouterr().out == "---\tERROR - something\n"


def test_current_is_shared(shared):
    shared.jwt_filename = "shared.jwt"
    assert current().jwt_filename == "shared.jwt"