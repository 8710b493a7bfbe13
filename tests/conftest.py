# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from astmerge.toolkit.query import find_config_object, parse_script

WEBPACK_CONFIG = """
const webpack = require("webpack");
const ExtractTextPlugin = require("extract-text-webpack-plugin");

module.exports = {
  entry: "./src/index.js",
  resolve: {
    extensions: [".js", ".jsx"]
  },
  plugins: [
    new webpack.DefinePlugin(),
    new webpack.LoaderOptionsPlugin({ minimize: false, debug: true })
  ]
};
"""


@pytest.fixture
def webpack_source() -> str:
    """Return a small but realistic webpack configuration."""
    return WEBPACK_CONFIG


@pytest.fixture
def program(webpack_source: str):
    """Return the parsed ``Program`` node of :data:`WEBPACK_CONFIG`."""
    return parse_script(webpack_source)


@pytest.fixture
def config_object(program):
    """Return the object literal assigned to ``module.exports``."""
    return find_config_object(program)


@pytest.fixture
def plugins_array(config_object):
    """Return the ``plugins: [...]`` array of the configuration object."""
    for prop in config_object.properties:
        if prop.key.name == "plugins":
            return prop.value
    raise AssertionError("fixture config has no plugins array")


@pytest.fixture
def config_file(tmp_path: Path, webpack_source: str) -> Path:
    """Write :data:`WEBPACK_CONFIG` to disk and return its path."""
    path = tmp_path / "webpack.config.js"
    path.write_text(webpack_source, encoding="utf-8")
    return path
