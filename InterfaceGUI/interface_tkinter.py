# InterfaceGUI/interface_tkinter.py

import logging
import tkinter as tk
from tkinter import ttk, messagebox, filedialog
import matplotlib.pyplot as plt
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg, NavigationToolbar2Tk

# Módulos para gerenciar caminhos de importação
import sys
import os

# Adiciona a raiz do projeto ao PATH para que os pacotes das camadas sejam encontrados
# quando a interface é executada diretamente da pasta InterfaceGUI.
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.append(project_root)

from CamadaFisica.sinais import CMI_LEGADO, CMI_PADRAO, EncodingType
from InterfaceGUI.grafico_pulsos import draw_pulse_train, export_figure
from Simulador.conversor import ConversorPulsos
from Utilidades.constantes import DEFAULTS, ENCODING_INFO

logger = logging.getLogger(__name__)


class PulseConverterGUI:
    """
    Interface Gráfica do Usuário (GUI) do Conversor de Códigos de Pulso.
    Permite escolher o texto e a codificação de linha, alternar opções de visualização,
    animar bit a bit e exportar o gráfico. Toda a lógica de codificação fica em ConversorPulsos;
    a GUI apenas consome o resultado.
    """
    def __init__(self, master: tk.Tk):
        """
        Inicializa a GUI do conversor.

        Args:
            master (tk.Tk): A janela principal do Tkinter (root).
        """
        self.master = master
        master.title("Conversor de Códigos de Pulso")
        master.geometry("1200x760")

        self.resultado = None
        self.active_bit = None
        self._animation_job = None

        # --- Variáveis de Controle do Tkinter ---
        self.text_input_var = tk.StringVar(value=DEFAULTS["INPUT_TEXT"])
        self.encoding_var = tk.StringVar(value=DEFAULTS["ENCODING"])
        self.connect_bits_var = tk.BooleanVar(value=True)
        self.midbit_markers_var = tk.BooleanVar(value=False)
        self.cmi_legado_var = tk.BooleanVar(value=False)
        self.summary_var = tk.StringVar()
        self.description_var = tk.StringVar()
        self.step_vars = [tk.StringVar() for _ in range(4)]

        main_frame = ttk.Frame(master, padding="10")
        main_frame.pack(fill=tk.BOTH, expand=True)
        main_frame.grid_columnconfigure(0, weight=1)
        main_frame.grid_columnconfigure(1, weight=3)
        main_frame.grid_rowconfigure(0, weight=1)

        # Coluna da esquerda: entrada e opções.
        config_frame = ttk.LabelFrame(main_frame, text="Configurações", padding="10")
        config_frame.grid(row=0, column=0, padx=10, pady=10, sticky="nsew")

        ttk.Label(config_frame, text="Texto a codificar:").pack(pady=5, anchor="w")
        entry = ttk.Entry(config_frame, textvariable=self.text_input_var, width=40)
        entry.pack(pady=5, fill=tk.X)
        entry.bind("<Return>", lambda _event: self.run_conversion())

        ttk.Label(config_frame, text="Código de pulso:").pack(pady=5, anchor="w")
        encoding_box = ttk.Combobox(config_frame, textvariable=self.encoding_var, state="readonly",
                                    values=[encoding.value for encoding in EncodingType])
        encoding_box.pack(pady=5, fill=tk.X)
        encoding_box.bind("<<ComboboxSelected>>", lambda _event: self.run_conversion())

        ttk.Checkbutton(config_frame, text="Conectar bits", variable=self.connect_bits_var,
                        command=self.redraw).pack(pady=2, anchor="w")
        ttk.Checkbutton(config_frame, text="Marcar transições no meio do bit", variable=self.midbit_markers_var,
                        command=self.redraw).pack(pady=2, anchor="w")
        ttk.Checkbutton(config_frame, text="CMI: convenção legada (+5V/-5V)", variable=self.cmi_legado_var,
                        command=self.run_conversion).pack(pady=2, anchor="w")

        ttk.Button(config_frame, text="Converter", command=self.run_conversion).pack(pady=(15, 5), fill=tk.X)
        self.animate_button = ttk.Button(config_frame, text="Animar bit a bit", command=self.toggle_animation)
        self.animate_button.pack(pady=5, fill=tk.X)
        ttk.Button(config_frame, text="Exportar imagem (PNG/SVG)", command=self.export_plot).pack(pady=5, fill=tk.X)

        # Etapas da conversão (string -> caracteres -> códigos -> binário -> pulsos).
        steps_frame = ttk.LabelFrame(config_frame, text="Processo de Conversão", padding="10")
        steps_frame.pack(pady=10, fill=tk.BOTH, expand=True)
        titles = ["1. String → Caracteres", "2. Caracteres → Códigos", "3. Códigos → Binário",
                  "4. Binário → Código de Pulso"]
        for title, var in zip(titles, self.step_vars):
            ttk.Label(steps_frame, text=title, font=('TkDefaultFont', 9, 'bold')).pack(anchor="w")
            ttk.Label(steps_frame, textvariable=var, wraplength=330, justify=tk.LEFT,
                      font=('TkFixedFont', 9)).pack(anchor="w", pady=(0, 6))

        self.status_label = ttk.Label(config_frame, text="Pronto.", foreground="blue", wraplength=330)
        self.status_label.pack(pady=5, anchor="w")

        # Coluna da direita: gráfico e descrição da codificação.
        plot_frame = ttk.LabelFrame(main_frame, text="Visualização do Código de Pulso", padding="10")
        plot_frame.grid(row=0, column=1, padx=10, pady=10, sticky="nsew")

        ttk.Label(plot_frame, textvariable=self.summary_var, font=('TkDefaultFont', 10, 'bold')).pack(anchor="w")
        self.fig, self.ax = plt.subplots(figsize=(10, 4.5))
        self.canvas = FigureCanvasTkAgg(self.fig, master=plot_frame)
        self.canvas.get_tk_widget().pack(fill=tk.BOTH, expand=True)
        self.toolbar = NavigationToolbar2Tk(self.canvas, plot_frame)
        self.toolbar.update()
        ttk.Label(plot_frame, textvariable=self.description_var, wraplength=750,
                  justify=tk.LEFT).pack(anchor="w", pady=5)

        self.run_conversion()

    def run_conversion(self):
        """
        Recalcula a conversão a partir do texto e da codificação selecionados e redesenha o gráfico.
        Texto vazio usa o texto padrão.
        """
        self.stop_animation()
        text = self.text_input_var.get() or DEFAULTS["INPUT_TEXT"]
        cmi = CMI_LEGADO if self.cmi_legado_var.get() else CMI_PADRAO
        try:
            self.resultado = ConversorPulsos(cmi=cmi).converter(text, self.encoding_var.get())
        except ValueError as e:
            logger.error(f"Falha na conversão: {e}")
            self.status_label.config(text=f"ERRO: {e}", foreground="red")
            return

        info = ENCODING_INFO[self.resultado.encoding.value]
        self.summary_var.set(f"{info['name']} ({self.resultado.summary})")
        self.description_var.set(info['description'])
        for var, step in zip(self.step_vars, self.resultado.steps()):
            var.set(step)
        self.status_label.config(text="Conversão concluída.", foreground="blue")
        self.redraw()

    def redraw(self):
        """Redesenha o trem de pulsos com as opções de visualização atuais."""
        if self.resultado is None:
            return
        draw_pulse_train(
            self.ax, self.resultado,
            connect_bits=self.connect_bits_var.get(),
            show_midbit_markers=self.midbit_markers_var.get(),
            active_bit=self.active_bit,
        )
        self.fig.tight_layout()
        self.canvas.draw()

    def toggle_animation(self):
        """Inicia ou interrompe a animação passo a passo (um bit destacado por vez)."""
        if self._animation_job is not None:
            self.stop_animation()
            return
        if self.resultado is None or self.resultado.total_bits == 0:
            return
        self.active_bit = 0
        self.animate_button.config(text="Parar animação")
        self._animation_step()

    def _animation_step(self):
        self.redraw()
        if self.active_bit >= self.resultado.total_bits - 1:
            self._animation_job = None
            self.animate_button.config(text="Animar bit a bit")
            return
        self.active_bit += 1
        self._animation_job = self.master.after(DEFAULTS["ANIMATION_INTERVAL_MS"], self._animation_step)

    def stop_animation(self):
        if self._animation_job is not None:
            self.master.after_cancel(self._animation_job)
            self._animation_job = None
        self.animate_button.config(text="Animar bit a bit")
        if self.active_bit is not None:
            self.active_bit = None
            self.redraw()

    def export_plot(self):
        """Exporta o gráfico atual em PNG ou SVG no caminho escolhido pelo usuário."""
        path = filedialog.asksaveasfilename(
            defaultextension=".png",
            filetypes=[("Imagem PNG", "*.png"), ("Imagem SVG", "*.svg")],
        )
        if not path:
            return
        try:
            export_figure(self.fig, path)
            self.status_label.config(text=f"Imagem exportada: {path}", foreground="blue")
        except ValueError as e:
            messagebox.showerror("Erro de Exportação", str(e))
        except OSError as e:
            messagebox.showerror("Erro de Exportação", f"Não foi possível salvar o arquivo: {e}")


def main():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    root = tk.Tk()
    PulseConverterGUI(root)
    root.mainloop()


# Ponto de entrada principal do aplicativo GUI.
if __name__ == "__main__":
    main()
