"""
Tests for the command line entry point.
"""

import json

import pytest

from conftest import write_files
from specfix.cli import main, parse_alias


@pytest.fixture
def project(tmp_path):
    write_files(tmp_path, {
        'src/foo.ts': 'export const a = 1;\n',
        'src/lib/util.ts': 'export const u = 1;\n',
        'src/index.ts': "export * from './foo';\nexport { u } from '@lib/util';\n",
    })
    return tmp_path


def test_rewrite_directory(project):
    status = main(['rewrite', str(project / 'src'), '--extension', 'mjs',
                   '--alias', '@lib=./src/lib', '--root', str(project)])

    assert status == 0
    assert (project / 'src' / 'index.ts').read_text() == (
        "export * from './foo.mjs';\nexport { u } from 'lib/util';\n"
    )


def test_rewrite_uses_config_file(project, capsys):
    (project / '.specfix.config.json').write_text(json.dumps({'extension': 'cjs'}))

    status = main(['rewrite', str(project / 'src' / 'index.ts'), '--root', str(project)])

    assert status == 0
    assert "export * from './foo.cjs';" in (project / 'src' / 'index.ts').read_text()
    assert 'rewrote' in capsys.readouterr().out


def test_command_line_overrides_config_file(project):
    (project / '.specfix.config.json').write_text(json.dumps({'extension': 'cjs'}))

    main(['rewrite', str(project / 'src'), '--extension', 'mjs', '--root', str(project)])

    assert "export * from './foo.mjs';" in (project / 'src' / 'index.ts').read_text()


def test_check_mode_reports_without_writing(project, capsys):
    before = (project / 'src' / 'index.ts').read_text()

    status = main(['rewrite', str(project / 'src'), '--extension', 'mjs', '--root', str(project), '--check'])

    assert status == 1
    assert (project / 'src' / 'index.ts').read_text() == before
    assert 'would rewrite' in capsys.readouterr().out


def test_configuration_error_exit_status(project, capsys):
    (project / '.specfix.config.json').write_text('{"extension": "js"}')

    status = main(['rewrite', str(project / 'src'), '--root', str(project)])

    assert status == 2
    assert 'error:' in capsys.readouterr().err


def test_patch_codegen(tmp_path):
    write_files(tmp_path, {
        'package.json': json.dumps({
            'codegenConfig': {
                'outputDir': {'android': 'android/generated'},
                'android': {'javaPackageName': 'com.bobtest'},
            },
        }),
        'android/generated/java/com/facebook/fbreact/specs/NativeBobtestSpec.java':
            'package com.facebook.fbreact.specs;\n',
    })

    assert main(['patch-codegen', str(tmp_path)]) == 0
    moved = tmp_path / 'android' / 'generated' / 'java' / 'com' / 'bobtest' / 'NativeBobtestSpec.java'
    assert moved.read_text() == 'package com.bobtest;\n'


def test_patch_codegen_without_package_json(tmp_path):
    assert main(['patch-codegen', str(tmp_path)]) == 2


def test_parse_alias():
    assert parse_alias('@lib=./src/lib') == ('@lib', './src/lib')
    assert parse_alias('a=b=c') == ('a', 'b=c')
