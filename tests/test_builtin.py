import os

import pytest

from pish.builtin import execute_builtin
from pish.session import OutcomeKind


def test_unknown_command_is_not_a_builtin(make_session) -> None:
    assert execute_builtin(["ls", "-l"], make_session()) is None
    assert execute_builtin(["Exit"], make_session()) is None


def test_exit_terminates_with_success(make_session) -> None:
    with pytest.raises(SystemExit) as exc:
        execute_builtin(["exit"], make_session())
    assert exc.value.code == 0


def test_exit_with_arguments_is_usage_error(make_session, history, capsys) -> None:
    history.record("echo hi")

    outcome = execute_builtin(["exit", "1"], make_session())

    assert outcome.kind is OutcomeKind.USAGE_ERROR
    assert capsys.readouterr().err == "pish: Usage error\n"
    assert history.list() == ["echo hi"]


def test_cd_changes_directory(make_session, workdir) -> None:
    target = workdir / "sub"
    target.mkdir()

    outcome = execute_builtin(["cd", str(target)], make_session())

    assert outcome.kind is OutcomeKind.BUILTIN
    assert os.getcwd() == str(target)


def test_cd_relative_path(make_session, workdir) -> None:
    (workdir / "rel").mkdir()
    execute_builtin(["cd", "rel"], make_session())
    assert os.getcwd() == str(workdir / "rel")


def test_cd_missing_directory_keeps_cwd(make_session, workdir, capsys) -> None:
    outcome = execute_builtin(["cd", "/definitely/not/a/real/path"], make_session())

    assert outcome.kind is OutcomeKind.BUILTIN
    assert os.getcwd() == str(workdir)
    assert capsys.readouterr().err.startswith("cd: ")


@pytest.mark.parametrize("args", [["cd"], ["cd", "a", "b"]])
def test_cd_wrong_arity_is_usage_error(make_session, history, workdir, capsys, args) -> None:
    (workdir / "a").mkdir()
    history.record("echo hi")

    outcome = execute_builtin(args, make_session())

    assert outcome.kind is OutcomeKind.USAGE_ERROR
    assert os.getcwd() == str(workdir)
    assert capsys.readouterr().err == "pish: Usage error\n"
    assert history.list() == ["echo hi"]


def test_history_lists_entries(make_session, history, capsys) -> None:
    history.record("echo hi")
    history.record("cd /tmp")

    outcome = execute_builtin(["history"], make_session())

    assert outcome.kind is OutcomeKind.BUILTIN
    assert capsys.readouterr().out == "1 echo hi\n2 cd /tmp\n"


def test_history_with_arguments_is_usage_error(make_session, history, capsys) -> None:
    history.record("echo hi")

    outcome = execute_builtin(["history", "-c"], make_session())

    assert outcome.kind is OutcomeKind.USAGE_ERROR
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "pish: Usage error\n"
    assert history.list() == ["echo hi"]
