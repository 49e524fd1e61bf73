# type: ignore
import pytest

import mathlon.common.ops as ops
from mathlon.codec.encode import encode_instruction

import unit_utils


@pytest.fixture
def with_program():
    # li/li/add/cmp/store/load/halt followed by one data word
    yield [
        encode_instruction(ops.LI, 2, addr_or_constant=100),
        encode_instruction(ops.LI, 3, addr_or_constant=7),
        encode_instruction(ops.ADD, 4, 2, 3),
        encode_instruction(ops.CMP, 4, 0, 0, 12),
        encode_instruction(ops.STORE, 4, addr_or_constant=1024),
        encode_instruction(ops.LOAD, 5, addr_or_constant=1024),
        encode_instruction(ops.HALT),
        0xDEADBEEF,
    ]


@pytest.fixture
def with_image(tmp_path, with_program):
    yield unit_utils.write_image(tmp_path / 'program.bin', with_program)
