# Utilidades/test_utils.py

import unittest
from Utilidades.utils import bits_to_int, char_to_binary, flatten_bits, format_log, text_to_binary


class TestUtils(unittest.TestCase):
    def test_text_to_binary(self):
        units = text_to_binary("Hi")
        self.assertEqual([u.binary for u in units], ["01001000", "01101001"])
        self.assertEqual([u.code_point for u in units], [72, 105])
        self.assertEqual(units[0].character, "H")

    def test_texto_vazio(self):
        self.assertEqual(text_to_binary(""), [])

    def test_oito_bits_por_caractere(self):
        texto = "Olá, mundo!\x00\xff"
        units = text_to_binary(texto)
        self.assertEqual(len(units), len(texto))
        self.assertTrue(all(len(u.bits) == 8 for u in units))

    def test_ida_e_volta_ascii(self):
        for unit in text_to_binary("".join(chr(c) for c in range(256))):
            self.assertEqual(bits_to_int(unit.bits), unit.code_point)

    def test_caractere_acima_de_255(self):
        unit = char_to_binary("€")  # U+20AC
        self.assertEqual(unit.binary, "10000010101100")
        self.assertEqual(bits_to_int(unit.bits), 0x20AC)
        truncado = char_to_binary("€", truncate=True)
        self.assertEqual(truncado.binary, "10101100")

    def test_char_to_binary_exige_um_caractere(self):
        with self.assertRaises(ValueError):
            char_to_binary("ab")

    def test_flatten_bits(self):
        self.assertEqual(flatten_bits(text_to_binary("A")), [0, 1, 0, 0, 0, 0, 0, 1])

    def test_bits_to_int_invalido(self):
        with self.assertRaises(ValueError):
            bits_to_int([1, 2])

    def test_format_log(self):
        self.assertEqual(format_log("0101"), "0101")
        self.assertEqual(len(format_log("01" * 100, max_len=20)), 20)


if __name__ == '__main__':
    unittest.main()
