"""End-to-end pipeline tests with fake recognizer, clipboard and panel."""
from __future__ import annotations

from note_ocr.core.errors import NoImageFound
from note_ocr.core.models import ExplicitFile, LastImageInNote, OcrResult, TypedPath
from note_ocr.core.vault import VaultFile
from note_ocr.utils.locale_utils import format_ui_text


def test_note_scenario_reaches_clipboard_and_panel(pipeline, settings_store, recognizer,
                                                   clipboard, panel, notices, vault_dir) -> None:
    settings_store.set("defaultImageFolder", "attach/")

    pipeline.run(LastImageInNote())

    assert recognizer.calls == [((vault_dir / "attach" / "img2.jpg").read_bytes(), "eng")]
    assert clipboard.contents == "HELLO"
    assert panel.result == OcrResult(text="HELLO", source_label="img2.jpg", language_code="eng")
    assert format_ui_text("panel_title", label=panel.result.source_label).endswith("img2.jpg")
    assert notices == [
        format_ui_text("running_ocr", label="img2.jpg", lang="eng"),
        format_ui_text("clipboard_copied"),
        format_ui_text("panel_shown"),
    ]


def test_language_code_is_read_at_run_time(pipeline, settings_store, recognizer) -> None:
    settings_store.set("ocrLang", "ara")
    pipeline.run(TypedPath("x/y.png"))
    assert recognizer.calls[0][1] == "ara"


def test_recognition_failure_never_reaches_sinks(pipeline, recognizer, clipboard, panel, notices) -> None:
    previous = OcrResult(text="OLD", source_label="old.png", language_code="eng")
    panel.result = previous
    recognizer.error = "Failed loading language 'xx'"

    pipeline.run(TypedPath("x/y.png"))

    assert clipboard.writes == 0
    assert panel.updates == 0
    assert panel.result is previous
    assert notices[-1] == format_ui_text("error_ocr")
    # engine detail stays in the log
    assert all("Failed loading" not in notice for notice in notices)


def test_locate_failure_is_single_notification(pipeline, active_note, recognizer, clipboard, notices) -> None:
    active_note["note"] = VaultFile("notes/plain.md")

    pipeline.run(LastImageInNote())

    assert notices == [format_ui_text(NoImageFound.message_key)]
    assert recognizer.calls == []
    assert clipboard.writes == 0


def test_missing_active_note(pipeline, active_note, notices) -> None:
    active_note["note"] = None
    pipeline.run(LastImageInNote())
    assert notices == [format_ui_text("error_no_active_note")]


def test_unexpected_error_gets_generic_message(pipeline, recognizer, notices, monkeypatch) -> None:
    def boom(image_bytes, language_code):
        raise KeyError("internal")

    monkeypatch.setattr(recognizer, "recognize", boom)
    pipeline.run(ExplicitFile(VaultFile("x/y.png")))

    assert notices[-1] == format_ui_text("error_unexpected")


def test_dispatch_receives_delivery_and_failures(pipeline, clipboard, recognizer) -> None:
    scheduled = []

    def dispatch(fn, *args):
        scheduled.append((fn, args))

    pipeline.run(TypedPath("x/y.png"), dispatch=dispatch)

    # running notice, then delivery; nothing executed yet
    assert [fn for fn, _ in scheduled] == [pipeline._notify, pipeline.sinks.deliver]
    assert clipboard.writes == 0

    fn, args = scheduled[-1]
    fn(*args)
    assert clipboard.contents == "HELLO"

    scheduled.clear()
    recognizer.error = "boom"
    pipeline.run(TypedPath("x/y.png"), dispatch=dispatch)
    assert scheduled[-1][0] == pipeline.report_failure


def test_later_result_replaces_earlier(pipeline, recognizer, panel) -> None:
    recognizer.text = "FIRST"
    pipeline.run(TypedPath("x/y.png"))
    recognizer.text = "SECOND"
    pipeline.run(ExplicitFile(VaultFile("attachments/scan.png")))

    assert panel.result.text == "SECOND"
    assert panel.result.source_label == "attachments/scan.png"


def test_blank_image_folder_reads_from_vault_root(pipeline, settings_store, active_note,
                                                  recognizer, clipboard, vault_dir) -> None:
    (vault_dir / "root.png").write_bytes((vault_dir / "x" / "y.png").read_bytes())
    (vault_dir / "notes" / "root.md").write_text("![[root.png]]", encoding="utf-8")
    active_note["note"] = VaultFile("notes/root.md")
    settings_store.set("defaultImageFolder", "")

    pipeline.run(LastImageInNote())

    assert recognizer.calls[0][0] == (vault_dir / "root.png").read_bytes()
    assert clipboard.contents == "HELLO"
