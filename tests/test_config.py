#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

Tests for configuration loading, templates and validation.

Author: GFAWeaver Development Team
License: MIT
"""

import pytest
import yaml

from gfaweaver.config import (
    DEFAULT_CONFIG,
    load_config,
    save_config_template,
    validate_config,
)


class TestLoadConfig:
    """Test configuration loading."""

    def test_defaults(self):
        config = load_config()
        assert config == DEFAULT_CONFIG
        assert config is not DEFAULT_CONFIG

    def test_defaults_are_copied(self):
        """Test that editing a loaded config leaves the defaults alone."""
        config = load_config()
        config['parser']['line_types']['gfa1']['paths'] = False
        assert DEFAULT_CONFIG['parser']['line_types']['gfa1']['paths'] is True

    def test_deep_merge(self, temp_output_dir):
        path = temp_output_dir / "user.yaml"
        path.write_text(yaml.safe_dump({
            'parser': {'tolerance': 'pedantic', 'line_types': {'gfa2': {'gaps': False}}},
            'parallel': {'threads': 4},
        }))
        config = load_config(path)
        assert config['parser']['tolerance'] == 'pedantic'
        assert config['parser']['integer_ids'] is False
        assert config['parser']['line_types']['gfa2']['gaps'] is False
        assert config['parser']['line_types']['gfa2']['edges'] is True
        assert config['parallel']['threads'] == 4
        assert config['export']['overlap'] == '0M'

    def test_empty_file(self, temp_output_dir):
        path = temp_output_dir / "empty.yaml"
        path.write_text("")
        assert load_config(path) == DEFAULT_CONFIG

    def test_missing_file_uses_defaults(self, temp_output_dir):
        assert load_config(temp_output_dir / "absent.yaml") == DEFAULT_CONFIG


class TestTemplates:
    """Test configuration templates."""

    @pytest.mark.parametrize("template,tolerance", [
        ('default', 'safe'),
        ('strict', 'pedantic'),
        ('lenient', 'ignore_all'),
    ])
    def test_template_tolerance(self, temp_output_dir, template, tolerance):
        path = temp_output_dir / f"{template}.yaml"
        save_config_template(path, template)
        config = load_config(path)
        assert config['parser']['tolerance'] == tolerance
        assert validate_config(config) == []

    def test_unknown_template(self, temp_output_dir):
        with pytest.raises(ValueError):
            save_config_template(temp_output_dir / "x.yaml", 'turbo')


class TestValidateConfig:
    """Test configuration validation."""

    def test_defaults_valid(self):
        assert validate_config(load_config()) == []

    def test_bad_tolerance(self):
        config = load_config()
        config['parser']['tolerance'] = 'sloppy'
        errors = validate_config(config)
        assert len(errors) == 1
        assert 'tolerance' in errors[0]

    def test_bad_line_types(self):
        config = load_config()
        config['parser']['line_types']['gfa1']['gaps'] = True
        config['parser']['line_types']['gfa3'] = {}
        errors = validate_config(config)
        assert len(errors) == 2

    @pytest.mark.parametrize("section,key,value", [
        ('export', 'gfa_version', 3),
        ('parallel', 'threads', 0),
        ('parallel', 'threads', 'many'),
        ('logging', 'level', 'chatty'),
    ])
    def test_bad_values(self, section, key, value):
        config = load_config()
        config[section][key] = value
        assert len(validate_config(config)) == 1


# GFAWeaver v0.1.0
# Any usage is subject to this software's license.
