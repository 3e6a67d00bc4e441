from __future__ import annotations

from pathlib import Path

import pytest

from humanize_proxy.common.config import ProxyConfig, load_cfg, load_config
from humanize_proxy.common.templates import SYSTEM_PROMPT, USER_TEMPLATE, build_messages, render_prompt

REPO_CONFIG = Path(__file__).resolve().parents[1] / "configs" / "humanizer.yaml"


def test_render_prompt_substitution() -> None:
    tpl = "Hello {{input}}!"
    out = render_prompt(tpl, "world")
    assert out == "Hello world!"


def test_build_messages_embeds_text_verbatim() -> None:
    msgs = build_messages("sys", USER_TEMPLATE, "a {b} $c")
    assert msgs[0] == {"role": "system", "content": "sys"}
    assert msgs[1]["content"] == "Please humanize this AI-generated content:\n\na {b} $c"


def test_repo_config_matches_builtin_defaults() -> None:
    cfg = load_config(REPO_CONFIG, environ={})
    assert cfg.model == "gpt-4o-mini"
    assert cfg.temperature == 0.8
    assert cfg.max_tokens == 2000
    assert cfg.system_prompt == SYSTEM_PROMPT
    assert cfg.user_template == USER_TEMPLATE


def test_missing_file_uses_defaults(tmp_path: Path) -> None:
    cfg = load_config(tmp_path / "absent.yaml", environ={})
    assert cfg == ProxyConfig(api_key=None)


def test_yaml_overrides(tmp_path: Path) -> None:
    p = tmp_path / "h.yaml"
    p.write_text("model: gpt-4o\ntemperature: 0.5\n", encoding="utf-8")
    cfg = load_config(p, environ={"OPENAI_API_KEY": "sk-x", "OPENAI_BASE_URL": "http://localhost:9000/"})
    assert cfg.model == "gpt-4o"
    assert cfg.temperature == 0.5
    assert cfg.max_tokens == 2000
    assert cfg.api_key == "sk-x"
    assert cfg.completions_url == "http://localhost:9000/v1/chat/completions"


def test_config_path_from_env(tmp_path: Path) -> None:
    p = tmp_path / "h.yaml"
    p.write_text("max_tokens: 100\n", encoding="utf-8")
    cfg = load_config(environ={"HUMANIZER_CONFIG": str(p)})
    assert cfg.max_tokens == 100


def test_empty_api_key_is_unset() -> None:
    assert load_config(REPO_CONFIG, environ={"OPENAI_API_KEY": ""}).api_key is None


def test_non_mapping_yaml_rejected(tmp_path: Path) -> None:
    p = tmp_path / "bad.yaml"
    p.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_cfg(p)
