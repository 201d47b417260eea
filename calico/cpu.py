#!/usr/bin/env python3

"""
CPU Emulator (CHIP-8)

Like a real computer, this is where most of the processing happens.  Each call
to step() fetches one big-endian instruction from RAM at the program counter,
advances the program counter, and then decodes and executes the instruction.

The CPU has no idea how fast it is running.  The host loop decides how many
instructions to execute per 60Hz tick, and when to decrement the timers, so
this module is free of any timing code and can be driven instruction by
instruction.

Instructions are looked up in a dictionary, first by their most significant
nibble, then (for groups sharing a nibble) by a masked copy of the opcode.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from random import randint
from .constants import PROGRAM_START, FONT_LOCATION, MAX_PROGRAM_SIZE, SYSTEM_FONT
from .framebuffer import Framebuffer
from .hostio import ProgramTooLarge
from .keypad import Keypad
from .ram import RAM
from .stack import Stack, StackError

CPU_ENDIAN = "big"  # CHIP-8 is big-endian


class CPUError(Exception):
    def __init__(self, message, pc):
        self.pc = pc
        super().__init__(message)


class InvalidOpcode(CPUError):
    def __init__(self, pc, opcode):
        self.opcode = opcode
        super().__init__("Invalid opcode 0x{:04x} at address 0x{:03x}".format(opcode, pc), pc)


class StackUnderflow(CPUError):
    def __init__(self, pc):
        super().__init__("Stack underflow at address 0x{:03x}".format(pc), pc)


class StackOverflow(CPUError):
    def __init__(self, pc):
        super().__init__("Stack overflow at address 0x{:03x}".format(pc), pc)


def uniform_byte():
    return randint(0, 0xFF)


class CPU:
    def __init__(self, ram=None, stack=None, framebuffer=None, keypad=None, sound_enabled=True, random_byte=None):
        self.ram = RAM() if ram is None else ram
        self.stack = Stack() if stack is None else stack
        self.framebuffer = Framebuffer() if framebuffer is None else framebuffer
        self.keypad = Keypad() if keypad is None else keypad
        self.sound_enabled = sound_enabled
        # Swappable so CXNN can be made deterministic
        self.random_byte = uniform_byte if random_byte is None else random_byte

        # Define instruction pointers.
        # n = Nibble
        # kk = Byte
        # nnn = address
        # x/y = register (0-15)
        self.instructions = {
            # Initial lookup for instructions' first nibble
            0x0: self._0nnn,  # Alias for bitmask 0xFFFF
            0x1: self._1nnn,
            0x2: self._2nnn,
            0x3: self._3xkk,
            0x4: self._4xkk,
            0x5: self._5nnn_8nnn_9nnn,  # Alias for bitmask 0xF00F
            0x6: self._6xkk,
            0x7: self._7xkk,
            0x8: self._5nnn_8nnn_9nnn,  # Alias for bitmask 0xF00F
            0x9: self._5nnn_8nnn_9nnn,  # Alias for bitmask 0xF00F
            0xA: self._Annn,
            0xB: self._Bnnn,
            0xC: self._Cxkk,
            0xD: self._Dxyn,
            0xE: self._Ennn_Fnnn,  # Alias for bitmask 0xF0FF
            0xF: self._Ennn_Fnnn,  # Alias for bitmask 0xF0FF
            # Instructions beginning with nibble 0x5/0x8/0x9, bitmask 0xF00F
            0x5000: self._5xy0,
            0x8000: self._8xy0,
            0x8001: self._8xy1,
            0x8002: self._8xy2,
            0x8003: self._8xy3,
            0x8004: self._8xy4,
            0x8005: self._8xy5,
            0x8006: self._8xy6,
            0x8007: self._8xy7,
            0x800E: self._8xyE,
            0x9000: self._9xy0,
            # Instructions beginning with nibble 0xE/0xF, bitmask 0xF0FF
            0xE09E: self._Ex9E,
            0xE0A1: self._ExA1,
            0xF007: self._Fx07,
            0xF00A: self._Fx0A,
            0xF015: self._Fx15,
            0xF018: self._Fx18,
            0xF01E: self._Fx1E,
            0xF029: self._Fx29,
            0xF033: self._Fx33,
            0xF055: self._Fx55,
            0xF065: self._Fx65
        }

        self.reset()

    def reset(self):
        # Initialise registers
        self.v = memoryview(bytearray(16))  # Bytearrays are mutable, so this should be fast when a register is updated
        self.i = 0  # Index register

        # Initialise timers
        self.dt = 0  # Delay timer
        self.st = 0  # Sound timer

        # Initialise program counter, and the address/opcode of the instruction being executed
        self.pc = PROGRAM_START
        self.op_pc = PROGRAM_START
        self.opcode = 0

        # Display-related vars
        self.draw_flag = False

        # Wipe all state, then write the system font into RAM
        self.ram.clear()
        self.ram.write_block(FONT_LOCATION, SYSTEM_FONT)
        self.stack.clear()
        self.framebuffer.clear()
        self.keypad.release_all()

    def load_program(self, program):
        if len(program) > MAX_PROGRAM_SIZE:
            raise ProgramTooLarge(len(program), MAX_PROGRAM_SIZE)

        self.ram.write_block(PROGRAM_START, program)

    def handle_key(self, key, down):
        self.keypad.set(key, down)

    def tick_timers(self):
        # Called by the host at 60Hz, after the instructions for that tick have executed
        if self.dt > 0:
            self.dt -= 1

        if self.st > 0:
            self.st -= 1

    def should_beep(self):
        return self.st != 0 and self.sound_enabled

    def take_frame(self):
        # Snapshot of the screen as 32 rows of 64 booleans
        return list(self.framebuffer.rows())

    def clear_draw_flag(self):
        self.draw_flag = False

    def step(self):
        # Keep track of the program counter before altering it, so errors can report where they happened
        self.op_pc = self.pc
        self.opcode = self.fetch()
        self.inc_pc()  # Program counter updates after fetch, but before execute
        self.decode_exec()

    def fetch(self):
        return int.from_bytes(self.ram.read_block(self.pc, 2), CPU_ENDIAN, signed=False)

    def _call_masked_instruction(self, masked_opcode):
        instruction = self.instructions.get(masked_opcode)

        if instruction is None:
            raise InvalidOpcode(self.op_pc, self.opcode)

        instruction()

    def decode_exec(self):
        self._call_masked_instruction((0xF000 & self.opcode) >> 12)

    def inc_pc(self):
        self.pc = (self.pc + 2) & 0xFFFF

    def dec_pc(self):
        # Only used to re-run instructions (i.e. waiting for a keypress)
        self.pc = (self.pc - 2) & 0xFFFF

    # References to Vx, Vy, byte and addr are always in the same opcode position throughout all instructions, so avoid
    # excessive code duplication.  Don't reference these more than necessary as they are recalculated each time.
    @property
    def vx(self):
        return (self.opcode & 0xF00) >> 8

    @property
    def vy(self):
        return (self.opcode & 0xF0) >> 4

    @property
    def addr(self):
        return self.opcode & 0xFFF

    @property
    def byte(self):
        return self.opcode & 0xFF

    @property
    def nibble(self):
        return self.opcode & 0xF

    def _push_pc(self):
        try:
            self.stack.push(self.pc)
        except StackError:
            raise StackOverflow(self.op_pc) from None

    def _0nnn(self):
        opcode = self.opcode

        if opcode == 0x00E0:
            self._00E0()
        elif opcode == 0x00EE:
            self._00EE()
        else:
            # Machine code routines can't be run, so treat them as a normal call
            self._2nnn()

    def _5nnn_8nnn_9nnn(self):
        self._call_masked_instruction(self.opcode & 0xF00F)

    def _Ennn_Fnnn(self):
        self._call_masked_instruction(self.opcode & 0xF0FF)

    def _00E0(self):  # CLS
        self.framebuffer.clear()
        self.draw_flag = True

    def _00EE(self):  # RET
        try:
            self.pc = self.stack.pop()
        except StackError:
            raise StackUnderflow(self.op_pc) from None

    def _1nnn(self):  # JP addr
        self.pc = self.addr

    def _2nnn(self):  # CALL addr
        self._push_pc()
        self.pc = self.addr

    def _3xkk(self):  # SE Vx, byte
        if self.v[self.vx] == self.byte:
            self.inc_pc()

    def _4xkk(self):  # SNE Vx, byte
        if self.v[self.vx] != self.byte:
            self.inc_pc()

    def _5xy0(self):  # SE Vx, Vy
        if self.v[self.vx] == self.v[self.vy]:
            self.inc_pc()

    def _6xkk(self):  # LD Vx, byte
        self.v[self.vx] = self.byte

    def _7xkk(self):  # ADD Vx, byte
        vx = self.vx
        self.v[vx] = (self.v[vx] + self.byte) & 0xFF  # Vf is untouched

    def _8xy0(self):  # LD Vx, Vy
        self.v[self.vx] = self.v[self.vy]

    def _8xy1(self):  # OR Vx, Vy
        self.v[self.vx] |= self.v[self.vy]

    def _8xy2(self):  # AND Vx, Vy
        self.v[self.vx] &= self.v[self.vy]

    def _8xy3(self):  # XOR Vx, Vy
        self.v[self.vx] ^= self.v[self.vy]

    def _8xy4(self):  # ADD Vx, Vy
        vx = self.vx
        val = self.v[vx] + self.v[self.vy]
        self.v[vx] = val & 0xFF
        self.v[0xF] = int(val > 0xFF)  # Vf is set when carrying

    def _post_8xy5_8xy7(self, val):  # Post-SUB/SUBN
        self.v[self.vx] = val & 0xFF
        # Vf is set when NOT borrowing, and this must happen AFTER Vx is set, as Vf may be Vx
        self.v[0xF] = int(val >= 0)

    def _8xy5(self):  # SUB Vx, Vy
        self._post_8xy5_8xy7(self.v[self.vx] - self.v[self.vy])

    def _8xy6(self):  # SHR Vx
        # Vy is ignored; Vx is shifted in place
        vx = self.vx
        val = self.v[vx]
        self.v[vx] = val >> 1
        self.v[0xF] = val & 1

    def _8xy7(self):  # SUBN Vx, Vy
        self._post_8xy5_8xy7(self.v[self.vy] - self.v[self.vx])

    def _8xyE(self):  # SHL Vx
        vx = self.vx
        val = self.v[vx]
        self.v[vx] = (val << 1) & 0xFF
        self.v[0xF] = val >> 7

    def _9xy0(self):  # SNE Vx, Vy
        if self.v[self.vx] != self.v[self.vy]:
            self.inc_pc()

    def _Annn(self):  # LD I, addr
        self.i = self.addr

    def _Bnnn(self):  # JP V0, addr
        self.pc = (self.addr + self.v[0x0]) & 0xFFFF

    def _Cxkk(self):  # RND Vx, byte
        # The ANDing here is intentional.  This is not a random number between 0 and 'byte' inclusive.
        self.v[self.vx] = self.random_byte() & self.byte

    def _Dxyn(self):  # DRW Vx, Vy, nibble
        # Sprites are always 8 pixels wide, and wrap around every edge of the screen
        vx_pos = self.v[self.vx]
        vy_pos = self.v[self.vy]
        i = self.i
        collided = False

        for y in range(self.nibble):
            spr_data = self.ram.read(i + y)

            for x in range(8):
                if spr_data & (0x80 >> x):
                    # Don't stop drawing on a collision, just remember it happened
                    if self.framebuffer.xor_pixel(vx_pos + x, vy_pos + y):
                        collided = True

        self.v[0xF] = int(collided)
        self.draw_flag = True

    def _Ex9E(self):  # SKP Vx
        if self.keypad.is_pressed(self.v[self.vx] & 0xF):
            self.inc_pc()

    def _ExA1(self):  # SKNP Vx
        if not self.keypad.is_pressed(self.v[self.vx] & 0xF):
            self.inc_pc()

    def _Fx07(self):  # LD Vx, DT
        self.v[self.vx] = self.dt

    def _Fx0A(self):  # LD Vx, K
        # This opcode waits for a keypress, but since the timers still need to expire correctly, and the framebuffer
        # still needs presenting, we return control to the host and simply rewind the program counter.  Key 0 is
        # never seen here, and the highest held key wins.
        key = None

        for key_num in range(1, 0x10):
            if self.keypad.is_pressed(key_num):
                key = key_num

        if key is None:
            self.dec_pc()
        else:
            self.v[self.vx] = key

    def _Fx15(self):  # LD DT, Vx
        self.dt = self.v[self.vx]

    def _Fx18(self):  # LD ST, Vx
        self.st = self.v[self.vx]

    def _Fx1E(self):  # ADD I, Vx
        self.i = (self.i + self.v[self.vx]) & 0xFFFF  # Vf is untouched

    def _Fx29(self):  # LD F, Vx
        self.i = self.v[self.vx] * 5

    def _Fx33(self):  # LD B, Vx
        val = self.v[self.vx]
        i = self.i
        self.ram.write(i, val // 100)           # Most-significant digit
        self.ram.write(i + 1, (val // 10) % 10)  # Middle digit
        self.ram.write(i + 2, val % 10)          # Least-significant digit

    def _Fx55(self):  # LD [I], Vx
        # I is left where it was
        vx = self.vx
        self.ram.write_block(self.i, self.v[:vx + 1])

    def _Fx65(self):  # LD Vx, [I]
        vx = self.vx
        self.v[:vx + 1] = self.ram.read_block(self.i, vx + 1)
