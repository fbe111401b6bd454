"""Unit tests for the scale table."""

import pandas as pd

from typeflow.models.settings import TypographySettings
from typeflow.scale_table import SCALE_TABLE_COLUMNS, build_scale_table


def test_table_shape():
    df = build_scale_table(TypographySettings())

    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == SCALE_TABLE_COLUMNS
    assert list(df.index) == ["body", "h1", "h2", "h3", "h4", "h5", "h6"]


def test_heading_rows():
    df = build_scale_table(TypographySettings())

    assert df.loc["h1", "desktop_px"] == 33
    assert df.loc["h1", "tablet_px"] == 30
    assert df.loc["h1", "mobile_px"] == 25
    assert df.loc["h6", "mobile_px"] == 11
    assert df.loc["h2", "line_height"] == 1.25
    assert df.loc["h5", "weight"] == 500
    assert df.loc["h1", "margin_bottom_px"] == 16


def test_body_row():
    df = build_scale_table(TypographySettings())

    assert df.loc["body", "desktop_px"] == 16
    assert df.loc["body", "tablet_px"] == 14
    assert df.loc["body", "mobile_px"] == 12
    assert df.loc["body", "weight"] == 400
    assert df.loc["body", "margin_bottom_px"] == 24


def test_non_responsive_columns_match():
    df = build_scale_table(TypographySettings(responsive_scaling=False))

    assert (df["desktop_px"] == df["tablet_px"]).all()
    assert (df["desktop_px"] == df["mobile_px"]).all()
