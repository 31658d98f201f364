"""Integration tests running mutation tests through to the reporters."""

from __future__ import annotations

from io import StringIO
import json

from eth_utils import is_checksum_address
import pytest

from ethereum_dsl.config import MutationTestOptions
from ethereum_dsl.reporting import ConsoleReporter, JsonReporter
from ethereum_dsl.testing import MutationTestCase, create_default_runner
from ethereum_dsl.types import AddressType, BlockTagType, Hex32Type, NumberType


WETH = '0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2'
BLOCK_HASH = '0x' + '3f' * 32


def _cases() -> list[MutationTestCase]:
    return [
        MutationTestCase('address', WETH, AddressType(), AddressType().is_valid),
        MutationTestCase('checksum', WETH, AddressType(), is_checksum_address),
        MutationTestCase('hash', BLOCK_HASH, Hex32Type(), Hex32Type().is_valid),
        MutationTestCase('tag', 'latest', BlockTagType(), lambda v: v == 'latest'),
        MutationTestCase('number', 42, NumberType(), lambda v: v == 42),
    ]


@pytest.mark.medium
@pytest.mark.asyncio
class TestReportingIntegration:
    """Run several cases and render their results."""

    async def test_console_report_lists_every_case(self):
        results = await create_default_runner().test_all(_cases(), MutationTestOptions(max_concurrency=3))
        output = StringIO()

        ConsoleReporter(output=output).write_report(results)

        text = output.getvalue()
        for name in ('address', 'checksum', 'hash', 'tag', 'number'):
            assert f'{name} (' in text
        assert 'hash (Hex32 via HashMutator)' in text
        assert 'Caught: 4 of 4 mutations (100%)' in text

    async def test_json_report_round_trips_through_file(self, tmp_path):
        results = await create_default_runner().test_all(_cases())
        output_path = tmp_path / 'report.json'

        JsonReporter().write_report(results, output_path)

        data = json.loads(output_path.read_text())
        assert list(data['tests']) == ['address', 'checksum', 'hash', 'tag', 'number']
        assert data['tests']['hash']['summary']['uncaught'] == 1
        assert data['tests']['number']['summary']['percentage'] == 100.0
        assert data['summary']['total'] == 5 + 5 + 5 + 4 + 8
