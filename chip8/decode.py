"""CHIP-8 instruction decoding."""

from chex import dataclass


@dataclass(frozen=True)
class DecodedInstruction:
    """Decoded CHIP-8 instruction with extracted operands."""
    raw: int
    opcode: int  # First nibble
    x: int       # Second nibble (VX register)
    y: int       # Third nibble (VY register)
    n: int       # Fourth nibble (4-bit immediate)
    nn: int      # Last byte (8-bit immediate)
    nnn: int     # Last 12 bits (12-bit address)


def decode(instruction: int) -> DecodedInstruction:
    """Decode 16-bit instruction into components."""
    instruction = int(instruction)
    return DecodedInstruction(
        raw=instruction,
        opcode=(instruction & 0xF000) >> 12,
        x=(instruction & 0x0F00) >> 8,
        y=(instruction & 0x00F0) >> 4,
        n=instruction & 0x000F,
        nn=instruction & 0x00FF,
        nnn=instruction & 0x0FFF
    )


_ALU_MNEMONICS = {
    0x0: "LD", 0x1: "OR", 0x2: "AND", 0x3: "XOR", 0x4: "ADD",
    0x5: "SUB", 0x6: "SHR", 0x7: "SUBN", 0xE: "SHL",
}

_MISC_FORMATS = {
    0x07: "LD V{x:X}, DT",
    0x0A: "LD V{x:X}, K",
    0x15: "LD DT, V{x:X}",
    0x18: "LD ST, V{x:X}",
    0x1E: "ADD I, V{x:X}",
    0x29: "LD F, V{x:X}",
    0x33: "LD B, V{x:X}",
    0x55: "LD [I], V{x:X}",
    0x65: "LD V{x:X}, [I]",
}


def disassemble(instruction: int) -> str:
    """Render an instruction word as an assembly mnemonic.

    Words that do not decode to a known instruction are shown as ``DW``.
    """
    i = decode(instruction)
    unknown = f"DW 0x{i.raw:04X}"

    if i.opcode == 0x0:
        if i.raw == 0x00E0:
            return "CLS"
        if i.raw == 0x00EE:
            return "RET"
        return f"SYS 0x{i.nnn:03X}"
    if i.opcode == 0x1:
        return f"JP 0x{i.nnn:03X}"
    if i.opcode == 0x2:
        return f"CALL 0x{i.nnn:03X}"
    if i.opcode == 0x3:
        return f"SE V{i.x:X}, 0x{i.nn:02X}"
    if i.opcode == 0x4:
        return f"SNE V{i.x:X}, 0x{i.nn:02X}"
    if i.opcode == 0x5:
        return f"SE V{i.x:X}, V{i.y:X}" if i.n == 0 else unknown
    if i.opcode == 0x6:
        return f"LD V{i.x:X}, 0x{i.nn:02X}"
    if i.opcode == 0x7:
        return f"ADD V{i.x:X}, 0x{i.nn:02X}"
    if i.opcode == 0x8:
        mnemonic = _ALU_MNEMONICS.get(i.n)
        return f"{mnemonic} V{i.x:X}, V{i.y:X}" if mnemonic else unknown
    if i.opcode == 0x9:
        return f"SNE V{i.x:X}, V{i.y:X}" if i.n == 0 else unknown
    if i.opcode == 0xA:
        return f"LD I, 0x{i.nnn:03X}"
    if i.opcode == 0xB:
        return f"JP V0, 0x{i.nnn:03X}"
    if i.opcode == 0xC:
        return f"RND V{i.x:X}, 0x{i.nn:02X}"
    if i.opcode == 0xD:
        return f"DRW V{i.x:X}, V{i.y:X}, {i.n}"
    if i.opcode == 0xE:
        if i.nn == 0x9E:
            return f"SKP V{i.x:X}"
        if i.nn == 0xA1:
            return f"SKNP V{i.x:X}"
        return unknown
    fmt = _MISC_FORMATS.get(i.nn)
    return fmt.format(x=i.x) if fmt else unknown
