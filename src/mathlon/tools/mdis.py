import sys
from pathlib import Path
import logging as lg

import click

from mathlon.codec.disasm import print_disassembly
from mathlon.tools.image import ImageError, load_image


EXIT_OK = 0
EXIT_BAD_IMAGE = 1
EXIT_REJECTED = 2


class DisasmSettings:
    verbose: bool
    instructions: int | None

    def __init__(self):
        self.verbose = False
        self.instructions = None

    def update(
        self,
        verbose: bool | None = None,
        instructions: int | None = None
    ):
        if verbose is not None:
            self.verbose = verbose

        if instructions is not None:
            self.instructions = instructions

        return self


def disassemble_file(settings: DisasmSettings, image_path: Path) -> int:
    try:
        image = load_image(image_path)
    except ImageError as e:
        lg.error(f'{e}')
        return EXIT_BAD_IMAGE

    if settings.instructions is not None:
        image.instructions = settings.instructions

    lg.info(
        f'Disassembling {len(image.words)} words, '
        f'{image.num_instrs()} instructions'
    )

    if not print_disassembly(image.words, image.num_instrs()):
        lg.error(f'Cannot disassemble {image_path.name}')
        return EXIT_REJECTED

    return EXIT_OK


@click.command()
@click.pass_context
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-n', '--instructions', type=int, help='Number of leading instruction words')
@click.argument('image', type=Path)
def disasm(ctx: click.Context, image: Path, **params):
    ctx.ensure_object(DisasmSettings)
    ctx.obj.update(**params)

    lg.basicConfig(level=lg.DEBUG if ctx.obj.verbose else lg.INFO)
    lg.info('MATHLON DISASM')

    sys.exit(disassemble_file(ctx.obj, image))


if __name__ == '__main__':
    disasm()
