"""Tests for the JsonReporter."""

from __future__ import annotations

import json

from ethereum_dsl.reporting import ErrorInfo, JsonReporter, MutationResult, MutationTestResult


def _results() -> dict[str, MutationTestResult]:
    return {
        'flag': MutationTestResult(
            original_value=True,
            mutations=[MutationResult(value=False, caught=False, execution_time_ms=0.5)],
            type_name='Boolean',
            operator_name='BooleanMutator',
        ),
        'number': MutationTestResult(
            original_value=42,
            mutations=[
                MutationResult(value=0, caught=True),
                MutationResult(value=43, caught=True, error=ErrorInfo.from_exception(KeyError('k'))),
                MutationResult(value=41, caught=True, error=ErrorInfo.timeout(50)),
            ],
            type_name='Number',
            operator_name='NumberMutator',
        ),
    }


class TestJsonReporter:
    """Test JSON report structure."""

    def test_output_is_valid_json(self):
        data = json.loads(JsonReporter().to_json(_results()))

        assert set(data) == {'summary', 'tests'}

    def test_overall_summary_spans_all_tests(self):
        data = json.loads(JsonReporter().to_json(_results()))

        assert data['summary'] == {
            'total': 4,
            'caught': 3,
            'uncaught': 1,
            'errors': 2,
            'timeouts': 1,
            'percentage': 75.0,
        }

    def test_test_entry(self):
        data = json.loads(JsonReporter().to_json(_results()))

        flag = data['tests']['flag']
        assert flag['original_value'] is True
        assert flag['type'] == 'Boolean'
        assert flag['operator'] == 'BooleanMutator'
        assert flag['mutations'] == [
            {'value': False, 'outcome': 'uncaught', 'caught': False, 'execution_time_ms': 0.5},
        ]

    def test_error_entries(self):
        data = json.loads(JsonReporter().to_json(_results()))

        mutations = data['tests']['number']['mutations']
        assert mutations[1]['outcome'] == 'error'
        assert mutations[1]['error']['exception_type'] == 'KeyError'
        assert mutations[2]['outcome'] == 'timeout'
        assert mutations[2]['error'] == {'kind': 'timeout', 'message': 'Timeout after 50ms'}

    def test_setup_error_entry(self):
        result = MutationTestResult(
            original_value=1,
            type_name='Number',
            setup_error=ErrorInfo.from_exception(RuntimeError('nope')),
        )

        data = json.loads(JsonReporter().to_json({'broken': result}))

        assert data['tests']['broken']['setup_error']['message'] == 'nope'
        assert data['tests']['broken']['mutations'] == []

    def test_non_json_values_are_written_as_repr(self):
        result = MutationTestResult(
            original_value={'hash': '0xab'},
            mutations=[MutationResult(value=(1, 2), caught=True)],
        )

        data = json.loads(JsonReporter().to_json({'obj': result}))

        assert data['tests']['obj']['original_value'] == "{'hash': '0xab'}"
        assert data['tests']['obj']['mutations'][0]['value'] == '(1, 2)'

    def test_lists_are_kept(self):
        result = MutationTestResult(original_value=[1, 2], mutations=[MutationResult(value=[None], caught=True)])

        data = json.loads(JsonReporter().to_json({'array': result}))

        assert data['tests']['array']['original_value'] == [1, 2]
        assert data['tests']['array']['mutations'][0]['value'] == [None]

    def test_write_report_creates_file(self, tmp_path):
        output_path = tmp_path / 'mutations.json'

        JsonReporter().write_report(_results(), output_path)

        assert json.loads(output_path.read_text())['summary']['total'] == 4
