from __future__ import annotations
import io
import logging

import pytest

from docbr.document import DocumentKind
from docbr.output import OutputMode, Presenter, render


def test_mode_flags():
    assert not OutputMode.RAW.formatted and not OutputMode.RAW.insert
    assert not OutputMode.RAW_INSERT.formatted and OutputMode.RAW_INSERT.insert
    assert OutputMode.FORMATTED.formatted and not OutputMode.FORMATTED.insert
    assert OutputMode.FORMATTED_INSERT.formatted and OutputMode.FORMATTED_INSERT.insert
    assert OutputMode("formatted-insert") is OutputMode.FORMATTED_INSERT


def test_render():
    assert render("52998224725", DocumentKind.CPF, OutputMode.RAW) == "52998224725"
    assert render("52998224725", DocumentKind.CPF, OutputMode.FORMATTED) == "529.982.247-25"
    assert render("11222333000181", DocumentKind.CNPJ, OutputMode.FORMATTED_INSERT) == "11.222.333/0001-81"


@pytest.mark.parametrize("mode,expected", [
    (OutputMode.RAW_INSERT, "11222333000181\n"),
    (OutputMode.FORMATTED_INSERT, "11.222.333/0001-81\n"),
])
def test_insert_modes_write_to_stream(mode, expected):
    buf = io.StringIO()
    Presenter(mode, stream=buf).emit("11222333000181", DocumentKind.CNPJ)
    assert buf.getvalue() == expected


def test_log_modes_do_not_touch_stream(caplog):
    buf = io.StringIO()
    caplog.set_level(logging.INFO, logger="docbr.output")
    text = Presenter(OutputMode.FORMATTED, stream=buf).emit("52998224725", DocumentKind.CPF)
    assert text == "529.982.247-25"
    assert buf.getvalue() == ""
    assert "CPF: 529.982.247-25" in caplog.text


def test_insert_defaults_to_stdout(capsys):
    Presenter(OutputMode.RAW_INSERT).emit("52998224725", DocumentKind.CPF)
    assert capsys.readouterr().out == "52998224725\n"
