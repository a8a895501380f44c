"""
Tests for relocating generated Android codegen sources.
"""

import pytest

from conftest import write_files
from specfix.codegen import Report, patch_codegen_android_package
from specfix.exceptions import CodegenError

PACKAGE_JSON = {
    'codegenConfig': {
        'outputDir': {
            'android': 'android/generated',
        },
        'android': {
            'javaPackageName': 'com.bobtest',
        },
    },
}

JAVA_MODULE_SPEC = """
/**
 * Some comment
 */

package com.facebook.fbreact.specs;

import com.example.exampleimport;

class SomeClass {
  public void someMethod() {
    // some code
  }
}"""

JAVA_VIEW_SPEC = """
/**
  * Some comment
  */

package com.facebook.react.viewmanagers;

public interface SomeInterface<T extends View> {
  void setColor(T view, @Nullable String value);
}
"""

JAVA_ROOT = 'android/generated/java'
MODULE_SPECS = f'{JAVA_ROOT}/com/facebook/fbreact/specs'
VIEW_SPECS = f'{JAVA_ROOT}/com/facebook/react/viewmanagers'


class RecordingReport(Report):
    def __init__(self):
        self.messages = []

    def info(self, message):
        self.messages.append(('info', message))

    def warn(self, message):
        self.messages.append(('warn', message))

    def error(self, message):
        self.messages.append(('error', message))

    def success(self, message):
        self.messages.append(('success', message))


@pytest.fixture
def project(tmp_path):
    write_files(tmp_path, {f'{MODULE_SPECS}/NativeBobtestSpec.java': JAVA_MODULE_SPEC})
    return tmp_path


def with_type(codegen_type):
    config = dict(PACKAGE_JSON['codegenConfig'], type=codegen_type)
    return {'codegenConfig': config}


def test_moves_the_files_to_correct_dir(project):
    report = RecordingReport()
    target = patch_codegen_android_package(project, PACKAGE_JSON, report)

    assert target == (project / JAVA_ROOT / 'com' / 'bobtest').resolve()
    assert target.is_dir()
    assert report.messages[-1][0] == 'success'


def test_replaces_the_package_name_in_the_files(project):
    patch_codegen_android_package(project, PACKAGE_JSON, RecordingReport())

    content = (project / JAVA_ROOT / 'com' / 'bobtest' / 'NativeBobtestSpec.java').read_text()
    assert 'package com.bobtest;' in content
    assert 'com.facebook.fbreact.specs' not in content
    assert 'import com.example.exampleimport;' in content


def test_removes_the_old_package_dir(project):
    patch_codegen_android_package(project, PACKAGE_JSON, RecordingReport())

    assert not (project / MODULE_SPECS).exists()
    assert not (project / JAVA_ROOT / 'com' / 'facebook').exists()


def test_does_not_delete_the_view_manager_specs(project):
    write_files(project, {f'{VIEW_SPECS}/BobtestViewManagerInterface.java': JAVA_VIEW_SPEC})

    patch_codegen_android_package(project, with_type('all'), RecordingReport())

    view_spec = project / VIEW_SPECS / 'BobtestViewManagerInterface.java'
    assert view_spec.exists()
    assert view_spec.read_text() == JAVA_VIEW_SPEC
    assert (project / JAVA_ROOT / 'com' / 'bobtest' / 'NativeBobtestSpec.java').exists()
    assert not (project / MODULE_SPECS).exists()


def test_components_only_without_module_specs(tmp_path):
    write_files(tmp_path, {f'{VIEW_SPECS}/BobtestViewManagerInterface.java': JAVA_VIEW_SPEC})
    report = RecordingReport()

    assert patch_codegen_android_package(tmp_path, with_type('components'), report) is None
    assert (tmp_path / VIEW_SPECS / 'BobtestViewManagerInterface.java').exists()
    assert report.messages[0][0] == 'info'


def test_missing_module_specs_is_an_error(tmp_path):
    (tmp_path / 'android' / 'generated').mkdir(parents=True)
    with pytest.raises(CodegenError):
        patch_codegen_android_package(tmp_path, PACKAGE_JSON, RecordingReport())


def test_same_package_is_a_no_op(project):
    package_json = {'codegenConfig': dict(PACKAGE_JSON['codegenConfig'], android={'javaPackageName': 'com.facebook.fbreact.specs'})}

    assert patch_codegen_android_package(project, package_json, RecordingReport()) is None
    assert (project / MODULE_SPECS / 'NativeBobtestSpec.java').read_text() == JAVA_MODULE_SPEC


@pytest.mark.parametrize('package_json', [
    {'codegenConfig': {'android': {'javaPackageName': 'com.bobtest'}}},
    {'codegenConfig': {'outputDir': {'android': 'android/generated'}}},
    {'codegenConfig': {'outputDir': {'android': 'missing/dir'}, 'android': {'javaPackageName': 'com.bobtest'}}},
    {},
])
def test_invalid_configuration(project, package_json):
    with pytest.raises(CodegenError):
        patch_codegen_android_package(project, package_json, RecordingReport())


def test_report_requires_every_hook():
    class PartialReport(Report):
        def info(self, message):
            pass

    with pytest.raises(TypeError):
        PartialReport()
