"""Test runners for ethereum-dsl.

- MutationTestRunner: validates every mutation of a seed value.
- PropertyTestRunner: checks a predicate against generated values.
- EthereumTester: one-call wrappers over both.
"""

from ethereum_dsl.testing.mutation_runner import (
    MutationTestCase,
    MutationTestRunner,
    OperatorNotApplicableError,
    create_default_runner,
)
from ethereum_dsl.testing.property_runner import PropertyTestCase, PropertyTestResult, PropertyTestRunner
from ethereum_dsl.testing.tester import CombinedTestResult, EthereumTester


__all__ = [
    'CombinedTestResult',
    'EthereumTester',
    'MutationTestCase',
    'MutationTestRunner',
    'OperatorNotApplicableError',
    'PropertyTestCase',
    'PropertyTestResult',
    'PropertyTestRunner',
    'create_default_runner',
]
