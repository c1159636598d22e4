# CamadaFisica/test_modulacoes_digitais.py

import unittest
import numpy as np
from CamadaFisica.modulacoes_digitais import DigitalEncoder, render_bit
from CamadaFisica.sinais import (
    CMI_LEGADO, EncodingState, EncodingType, PulseSegment, TransitionMarker, Voltage,
)


class TestDigitalEncoder(unittest.TestCase):
    def setUp(self):
        self.encoder = DigitalEncoder()
        self.state = EncodingState()

    def test_nrz(self):
        entrada = [1, 0, 1, 0]
        esperado = np.array([-1, 1, -1, 1])  # NRZ invertido: 1 → -5V, 0 → +5V
        resultado = self.encoder.encode(entrada, "NRZ", samples_per_bit=1)
        np.testing.assert_array_equal(resultado, esperado)

    def test_nrz_independe_do_estado(self):
        for state in (EncodingState(1, 0), EncodingState(-1, 1)):
            self.assertEqual(self.encoder.render_bit(1, EncodingType.NRZ, state).start_voltage, Voltage.LOW)
            self.assertEqual(self.encoder.render_bit(0, EncodingType.NRZ, state).end_voltage, Voltage.HIGH)

    def test_rz(self):
        um = self.encoder.render_bit(1, EncodingType.RZ, self.state)
        zero = self.encoder.render_bit(0, EncodingType.RZ, self.state)
        self.assertEqual((um.start_voltage, um.end_voltage), (Voltage.LOW, Voltage.ZERO))
        self.assertEqual((zero.start_voltage, zero.end_voltage), (Voltage.HIGH, Voltage.ZERO))
        self.assertEqual(um.transitions, [TransitionMarker(0.5, Voltage.LOW, Voltage.ZERO)])
        self.assertEqual(zero.transitions, [TransitionMarker(0.5, Voltage.HIGH, Voltage.ZERO)])

    def test_manchester(self):
        entrada = [1, 0]
        esperado = np.array([1, -1, -1, 1])  # 1 → [1, -1], 0 → [-1, 1]
        resultado = self.encoder.encode(entrada, "Manchester", samples_per_bit=2)
        np.testing.assert_array_equal(resultado, esperado)
        um = self.encoder.render_bit(1, EncodingType.MANCHESTER, self.state)
        self.assertEqual(um.segments, (
            PulseSegment(0.0, 0.5, Voltage.HIGH),
            PulseSegment(0.5, 1.0, Voltage.LOW),
            TransitionMarker(0.5, Voltage.HIGH, Voltage.LOW),
        ))

    def test_ami(self):
        entrada = [1, 0, 1, 1]
        esperado = np.array([1, 0, -1, 1])  # alterna entre +1/-1 para bits 1
        resultado = self.encoder.encode(entrada, "AMI", samples_per_bit=1)
        np.testing.assert_array_equal(resultado, esperado)

    def test_ami_usa_polaridade_do_estado(self):
        render = self.encoder.render_bit(1, EncodingType.AMI, EncodingState(ami_polarity=-1))
        self.assertEqual(render.start_voltage, Voltage.LOW)
        self.assertFalse(render.has_mid_transition)

    def test_cmi(self):
        entrada = [1, 0, 1, 1]
        esperado = np.array([0, 0, 0, 1, 1, 1, 0, 0])
        resultado = self.encoder.encode(entrada, "CMI", samples_per_bit=2)
        np.testing.assert_array_equal(resultado, esperado)

    def test_cmi_transicao_apenas_no_bit_zero(self):
        self.assertTrue(self.encoder.render_bit(0, EncodingType.CMI, self.state).has_mid_transition)
        self.assertFalse(self.encoder.render_bit(1, EncodingType.CMI, self.state).has_mid_transition)

    def test_cmi_convencao_legada(self):
        encoder = DigitalEncoder(cmi=CMI_LEGADO)
        resultado = encoder.encode([1, 0, 1], "CMI", samples_per_bit=2)
        np.testing.assert_array_equal(resultado, np.array([1, 1, 1, -1, -1, -1]))

    def test_tensoes_inicio_fim(self):
        for encoding in EncodingType:
            for bit in (0, 1):
                render = self.encoder.render_bit(bit, encoding, self.state)
                self.assertEqual(render.start_voltage, render.voltage_at(0.0))
                self.assertEqual(render.end_voltage, render.voltage_at(1.0))

    def test_todas_as_codificacoes_tem_tratador(self):
        for encoding in EncodingType:
            self.assertIsNotNone(self.encoder.render_bit(0, encoding, self.state))

    def test_encode_dispatch(self):
        entrada = [0, 1]
        for nome in ("NRZ", "RZ", "Manchester", "AMI", "CMI"):
            self.assertEqual(len(self.encoder.encode(entrada, nome)), 20)
        with self.assertRaises(ValueError):
            self.encoder.encode(entrada, "Inexistente")

    def test_bit_invalido(self):
        for invalido in (2, -1, '2', 'a', None, 0.5):
            with self.assertRaises(ValueError):
                self.encoder.render_bit(invalido, EncodingType.NRZ, self.state)

    def test_bit_booleano_rejeitado(self):
        for invalido in (True, False):
            with self.assertRaises(ValueError):
                self.encoder.render_bit(invalido, EncodingType.AMI, self.state)

    def test_estado_invalido(self):
        # Nível do CMI fora de {0, 1} e polaridade do AMI fora de {+1, -1} falham na criação do estado.
        for kwargs in ({"cmi_level": -1}, {"cmi_level": 2}, {"ami_polarity": 0}):
            with self.assertRaises(ValueError):
                EncodingState(**kwargs)
        with self.assertRaises(ValueError):
            render_bit(1, "CMI", EncodingState(cmi_level=2))

    def test_bit_como_caractere(self):
        self.assertEqual(render_bit('1', "NRZ", self.state).bit_value, 1)

    def test_amostras_por_bit_invalido(self):
        with self.assertRaises(ValueError):
            self.encoder.encode([1], "NRZ", samples_per_bit=0)

    def test_render_bits_indices_globais(self):
        renders = self.encoder.render_bits([1, 0, 1], "AMI", start_index=8)
        self.assertEqual([r.global_index for r in renders], [8, 9, 10])
        self.assertEqual([r.start_voltage for r in renders], [Voltage.HIGH, Voltage.ZERO, Voltage.LOW])

    def test_time_axis(self):
        t = DigitalEncoder.time_axis(2, samples_per_bit=4, bit_rate=1000)
        self.assertEqual(len(t), 8)
        self.assertAlmostEqual(t[1], 0.00025)


if __name__ == '__main__':
    unittest.main()
