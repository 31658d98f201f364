"""ethereum-dsl: property and mutation testing for Ethereum-facing code.

ethereum-dsl describes Ethereum values with type descriptors, generates
samples of them with properties, and checks validators against
deliberately broken variants produced by mutation operators.

Example:
    Check that a validator rejects malformed addresses::

        from ethereum_dsl.testing import create_default_runner
        from ethereum_dsl.types import AddressType

        runner = create_default_runner()
        result = await runner.test(
            '0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2',
            AddressType(),
            my_validator,
        )
        assert result.summary.uncaught == 0

    Inside pytest, the ``mutation_runner`` fixture gives each test its own
    runner and registry.
"""

from __future__ import annotations


__version__ = '0.1.0'
__all__ = ['__version__']
