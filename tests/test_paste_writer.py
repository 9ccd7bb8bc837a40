from dataclasses import replace

from config import COPY_SOUND_NAME, PNG_TYPE, STRING_TYPE
from models import ClipboardRepresentation, HistoryItem
from paste_writer import PasteWriter

TEXT = ClipboardRepresentation(STRING_TYPE, b"hello")
IMAGE = ClipboardRepresentation(PNG_TYPE, b"png")


def _writer(pasteboard, settings):
    sounds = []
    return PasteWriter(pasteboard, settings, play_sound=sounds.append), sounds


def test_copy_clears_and_writes_all_contents(pasteboard, settings):
    pasteboard.user_copy([("public.html", b"<i>old</i>")])
    writer, _ = _writer(pasteboard, settings)
    before = pasteboard.count

    writer.copy(HistoryItem((TEXT, IMAGE)))

    assert pasteboard.count == before + 1
    assert pasteboard.items() == [[(STRING_TYPE, b"hello"), (PNG_TYPE, b"png")]]


def test_remove_formatting_keeps_only_text(pasteboard, settings):
    writer, _ = _writer(pasteboard, settings)
    writer.copy(HistoryItem((TEXT, IMAGE)), remove_formatting=True)
    assert pasteboard.items() == [[(STRING_TYPE, b"hello")]]


def test_remove_formatting_without_text_writes_everything(pasteboard, settings):
    writer, _ = _writer(pasteboard, settings)
    writer.copy(HistoryItem((IMAGE,)), remove_formatting=True)
    assert pasteboard.items() == [[(PNG_TYPE, b"png")]]


def test_plays_sound_only_when_enabled(pasteboard, settings):
    writer, sounds = _writer(pasteboard, settings)
    writer.copy(HistoryItem((TEXT,)))
    assert sounds == [COPY_SOUND_NAME]

    settings.settings = replace(settings.settings, play_sounds=False)
    writer.copy(HistoryItem((TEXT,)))
    assert sounds == [COPY_SOUND_NAME]
