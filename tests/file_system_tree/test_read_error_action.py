"""Unit tests for the read_error_action module."""

from fstree.file_system_tree.read_error_action import ReadErrorAction


def test_read_error_action_enum():
    assert ReadErrorAction.RECORD == "record"
    assert ReadErrorAction.RAISE == "raise"

    assert ReadErrorAction("record") is ReadErrorAction.RECORD
    assert ReadErrorAction("raise") is ReadErrorAction.RAISE


def test_read_error_action_comparison():
    assert "record" == ReadErrorAction.RECORD
    assert ReadErrorAction.RECORD != "raise"
    assert ReadErrorAction.RAISE != "record"
