import pytest

from gitam.utils.classes import AliasDefinition, NativeInvocation, ShellInvocation
from gitam.utils.errors import NotFoundError
from gitam.utils.resolver import classify, lookup


def test_lookup_returns_exact_definition():
    table = {"lg": "log --pretty=format:%h by %an", "st": "status"}
    definition = lookup("lg", table)
    assert definition == AliasDefinition(name="lg", raw="log --pretty=format:%h by %an")


def test_lookup_missing_alias():
    with pytest.raises(NotFoundError) as e:
        lookup("nope", {"st": "status"})
    assert e.value.alias_name == "nope"
    assert "Alias 'nope' not found" in str(e.value)


def test_classify_shell_alias():
    invocation = classify(AliasDefinition(name="hi", raw="!echo hi"))
    assert invocation == ShellInvocation(command="echo hi")


def test_classify_native_alias():
    invocation = classify(AliasDefinition(name="one", raw="log --oneline"))
    assert invocation == NativeInvocation(tokens=("log", "--oneline"))


def test_classify_keeps_format_tokens_for_reassembly():
    invocation = classify(AliasDefinition(name="lg", raw="log --pretty=format:%h by %an"))
    assert invocation.tokens == ("log", "--pretty=format:%h", "by", "%an")


def test_classify_bang_only_inside_definition_is_native():
    invocation = classify(AliasDefinition(name="odd", raw="log --grep=!wip"))
    assert isinstance(invocation, NativeInvocation)


def test_classify_honours_quoted_arguments():
    invocation = classify(AliasDefinition(name="cm", raw='commit --allow-empty -m "wip stuff"'))
    assert invocation.tokens == ("commit", "--allow-empty", "-m", "wip stuff")


def test_classify_quoted_format_value_is_one_token():
    invocation = classify(AliasDefinition(name="lg", raw="log --pretty=format:'%h %s' -n 1"))
    assert invocation.tokens == ("log", "--pretty=format:%h %s", "-n", "1")


def test_classify_unbalanced_quote_falls_back_to_whitespace():
    invocation = classify(AliasDefinition(name="bad", raw='log --grep="wip -n 1'))
    assert invocation.tokens == ("log", '--grep="wip', "-n", "1")
