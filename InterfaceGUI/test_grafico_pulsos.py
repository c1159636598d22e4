# InterfaceGUI/test_grafico_pulsos.py

import os
import tempfile
import unittest

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from InterfaceGUI.grafico_pulsos import draw_pulse_train, export_figure, plot_pulse_train
from Simulador.conversor import ConversorPulsos


class TestGraficoPulsos(unittest.TestCase):
    def setUp(self):
        self.resultado = ConversorPulsos().converter("Hi", "Manchester")

    def tearDown(self):
        plt.close('all')

    def test_plot_pulse_train(self):
        fig = plot_pulse_train(self.resultado)
        ax = fig.axes[0]
        self.assertEqual(len(ax.get_xticks()), 16)
        self.assertEqual([label.get_text() for label in ax.get_xticklabels()][:8],
                         ["0", "1", "0", "0", "1", "0", "0", "0"])

    def test_opcoes_de_visualizacao(self):
        fig, ax = plt.subplots()
        draw_pulse_train(ax, self.resultado, connect_bits=False)
        sem_conectores = len(ax.collections)
        draw_pulse_train(ax, self.resultado, connect_bits=True, show_midbit_markers=True, active_bit=3)
        self.assertGreater(len(ax.collections), sem_conectores)

    def test_texto_vazio(self):
        fig = plot_pulse_train(ConversorPulsos().converter("", "NRZ"))
        self.assertEqual(fig.axes[0].get_xlim(), (0.0, 1.0))

    def test_export_png_svg(self):
        fig = plot_pulse_train(self.resultado)
        with tempfile.TemporaryDirectory() as tmp:
            for nome in ("pulsos.png", "pulsos.svg"):
                caminho = os.path.join(tmp, nome)
                export_figure(fig, caminho)
                self.assertGreater(os.path.getsize(caminho), 0)

    def test_export_formato_invalido(self):
        fig = plot_pulse_train(self.resultado)
        with self.assertRaises(ValueError):
            export_figure(fig, "pulsos.jpg")


if __name__ == '__main__':
    unittest.main()
