"""Test doubles for the validation engine."""

import asyncio

from formstate.validators import Schema


def gated_factory(gate: asyncio.Event):
    """Engine factory whose validations wait for `gate` before checking."""

    def factory(descriptor):
        schema = Schema(descriptor)

        class _GatedEngine:
            async def validate(self, values):
                await gate.wait()
                await schema.validate(values)

        return _GatedEngine()

    return factory


class BrokenEngine:
    """Engine that fails with an unexpected fault."""

    def __init__(self, descriptor):
        self.descriptor = descriptor

    async def validate(self, values):
        raise RuntimeError("engine down")
