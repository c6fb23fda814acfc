import os
from pathlib import Path

import pytest

import genapi
import genapi.generator as generator_module
from genapi.cli import main
from genapi.config import CATALOG_ENV, OUTPUT_ENV, ROOT_ENV, GeneratorConfig
from genapi.errors import (
    CatalogEmptyWarning,
    ConfigError,
    NameCollisionError,
    OutputWriteError,
)
from genapi.generator import (
    collect_descriptors,
    generate,
    generate_source,
    is_up_to_date,
    write_output,
)

API_MODULE = Path(genapi.__file__).resolve().parent / "api_gen.py"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (ROOT_ENV, OUTPUT_ENV, CATALOG_ENV):
        monkeypatch.delenv(name, raising=False)


def _write_declarations(root: Path, unary_body: str, binary_body: str) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    (root / "operator_pointwise_unary_const.py").write_text(
        f"class UnaryOperatorType(IntEnum):\n{unary_body}", encoding="utf-8"
    )
    (root / "operator_pointwise_binary_const.py").write_text(
        f"class BinaryOperatorType(IntEnum):\n{binary_body}", encoding="utf-8"
    )
    return root


def test_shipped_api_module_matches_fresh_generation():
    source = generate_source(GeneratorConfig())
    if os.getenv("UPDATE_REFS"):
        API_MODULE.write_text(source, encoding="utf-8")
    expected = API_MODULE.read_text(encoding="utf-8")
    assert source == expected


def test_generation_is_deterministic():
    config = GeneratorConfig()

    assert generate_source(config) == generate_source(config)


def test_registry_catalog_generates_the_same_module():
    assert generate_source(GeneratorConfig(catalog="registry")) == generate_source(
        GeneratorConfig()
    )


def test_descriptors_follow_declaration_order(tmp_path):
    root = _write_declarations(
        tmp_path / "decl",
        "    lnOpType = 0\n    absOpType = 1\n    maxUnaryOperator = 2\n",
        "    divOpType = 0\n    eqOpType = 1\n    maxBinaryOpType = 2\n",
    )

    unary, binary = collect_descriptors(GeneratorConfig(root=root))

    assert [desc.public_name for desc in unary] == ["Log", "Abs"]
    assert [desc.public_name for desc in binary] == ["HadamardDiv", "Eq"]
    assert [desc.needs_result_flag for desc in binary] == [False, True]


def test_empty_group_generates_no_operators(tmp_path):
    root = _write_declarations(
        tmp_path / "decl",
        "    maxUnaryOperator = 0\n",
        "    addOpType = 0\n    maxBinaryOpType = 1\n",
    )

    with pytest.warns(CatalogEmptyWarning):
        source = generate_source(GeneratorConfig(root=root))

    assert "unary_op_node(new_elem_unary_op" not in source
    assert "def Add(a: Node, b: Node) -> Node:" in source


def test_generate_writes_output(tmp_path):
    output = tmp_path / "out" / "api_gen.py"

    source = generate(GeneratorConfig(output=output))

    assert output.read_text(encoding="utf-8") == source
    assert is_up_to_date(output, source)
    assert not is_up_to_date(tmp_path / "absent.py", source)


def test_failed_replace_keeps_previous_output(tmp_path, monkeypatch):
    output = tmp_path / "api_gen.py"
    output.write_text("previous\n", encoding="utf-8")

    def _fail_replace(src, dst):
        raise PermissionError("read-only target")

    monkeypatch.setattr(generator_module.os, "replace", _fail_replace)

    with pytest.raises(OutputWriteError, match="read-only target"):
        write_output(output, "new\n")

    assert output.read_text(encoding="utf-8") == "previous\n"
    assert sorted(path.name for path in tmp_path.iterdir()) == ["api_gen.py"]


def test_unwritable_output_directory(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(OutputWriteError):
        write_output(blocker / "api_gen.py", "source\n")


def test_config_from_env(tmp_path):
    root = _write_declarations(tmp_path / "decl", "    a = 0\n", "    b = 0\n")
    env = {
        ROOT_ENV: str(root),
        OUTPUT_ENV: str(tmp_path / "gen.py"),
        CATALOG_ENV: "registry",
    }

    config = GeneratorConfig.from_env(env)

    assert config.root == root
    assert config.output == tmp_path / "gen.py"
    assert config.catalog == "registry"
    assert config.unary_source == root / "operator_pointwise_unary_const.py"


def test_config_overrides_take_precedence(tmp_path):
    config = GeneratorConfig.from_env(
        {OUTPUT_ENV: str(tmp_path / "env.py")}, output=tmp_path / "flag.py", root=None
    )

    assert config.output == tmp_path / "flag.py"
    assert config.root == GeneratorConfig().root


def test_config_rejects_missing_root(tmp_path):
    with pytest.raises(ConfigError, match="GENAPI_ROOT"):
        GeneratorConfig.from_env({ROOT_ENV: str(tmp_path / "missing")})


def test_config_rejects_unknown_catalog():
    with pytest.raises(ConfigError, match="catalog must be one of"):
        GeneratorConfig.from_env({CATALOG_ENV: "yaml"})


def test_cli_writes_and_checks(tmp_path):
    output = tmp_path / "api_gen.py"

    assert main(["--output", str(output)]) == 0
    assert output.read_text(encoding="utf-8") == generate_source(GeneratorConfig())
    assert main(["--output", str(output), "--check"]) == 0

    output.write_text("stale\n", encoding="utf-8")

    assert main(["--output", str(output), "--check"]) == 1
    assert output.read_text(encoding="utf-8") == "stale\n"


def test_cli_reads_env(tmp_path, monkeypatch):
    output = tmp_path / "from_env.py"
    monkeypatch.setenv(OUTPUT_ENV, str(output))

    assert main(["--catalog", "registry"]) == 0
    assert output.exists()


def test_cli_reports_errors(tmp_path, capsys):
    output = tmp_path / "api_gen.py"

    assert main(["--root", str(tmp_path / "nowhere"), "--output", str(output)]) == 1

    assert "[genapi] error: cannot parse declarations" in capsys.readouterr().err
    assert not output.exists()


def test_cli_reports_config_errors(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv(ROOT_ENV, str(tmp_path / "missing"))

    assert main([]) == 1
    assert "GENAPI_ROOT" in capsys.readouterr().err


def test_repeated_declaration_fails_generation(tmp_path):
    root = _write_declarations(
        tmp_path / "decl",
        "    absOpType = 0\n    absOpType = 1\n    maxUnaryOperator = 2\n",
        "    addOpType = 0\n    maxBinaryOpType = 1\n",
    )

    with pytest.raises(NameCollisionError, match="Abs"):
        generate_source(GeneratorConfig(root=root))


def test_unreadable_check_target(tmp_path):
    with pytest.raises(OutputWriteError, match="cannot read"):
        is_up_to_date(tmp_path, "source\n")


def test_cli_check_against_directory(tmp_path, capsys):
    assert main(["--output", str(tmp_path), "--check"]) == 1
    assert "[genapi] error: cannot read" in capsys.readouterr().err
