# strongpass/gui.py
# StrongPass GUI: generator, strength meter, theme toggle and live clock

import logging
import sys
import typing
from functools import partial

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QClipboard
from PySide6.QtWidgets import (
    QApplication, QWidget, QHBoxLayout, QVBoxLayout, QLabel, QLineEdit,
    QPushButton, QSpinBox, QGroupBox, QGridLayout, QProgressBar,
)

from strongpass.charsets import CharacterClass
from strongpass.cli import setup_logging
from strongpass.clock import now_strings, TICK_MS
from strongpass.config import (
    GenerationConfig, MIN_UI_LENGTH, MAX_UI_LENGTH, generation_config_from, load_config, save_config,
)
from strongpass.exceptions import ConfigFileError
from strongpass.generator import generate, clamp_length
from strongpass.score import score, NONE_RESULT, StrengthResult

logger = logging.getLogger(__name__)

COPIED_FEEDBACK_MS = 2000
TOAST_MS = 2500
NO_CLASS_WARNING = "Select at least one character type"

# (class, short label, description)
TOGGLES = (
    (CharacterClass.UPPERCASE, "ABC", "Uppercase"),
    (CharacterClass.LOWERCASE, "abc", "Lowercase"),
    (CharacterClass.DIGIT, "123", "Numbers"),
    (CharacterClass.SYMBOL, "@#$", "Symbols"),
)

THEMES = {
    "light": "QWidget { background: #f8fafc; color: #0f172a; }"
             " QLineEdit, QSpinBox { background: #ffffff; }",
    "dark": "QWidget { background: #0f172a; color: #e2e8f0; }"
            " QLineEdit, QSpinBox { background: #1e293b; }",
}

# ---------------- UI building helpers ----------------

def make_clock_group():
    box = QWidget()
    layout = QHBoxLayout()
    box.setLayout(layout)
    lbl_time = QLabel()
    lbl_date = QLabel()
    btn_theme = QPushButton()
    layout.addWidget(lbl_time)
    layout.addWidget(lbl_date)
    layout.addStretch(1)
    layout.addWidget(btn_theme)
    return {"widget": box, "lbl_time": lbl_time, "lbl_date": lbl_date, "btn_theme": btn_theme}


def make_generator_group(config: GenerationConfig):
    box = QGroupBox("Password Generator")
    layout = QGridLayout()
    box.setLayout(layout)

    txt_password = QLineEdit()
    txt_password.setReadOnly(True)
    lbl_warning = QLabel(NO_CLASS_WARNING)
    lbl_warning.setVisible(False)
    btn_copy = QPushButton("Copy")
    btn_regenerate = QPushButton("Regenerate")

    bar_strength = QProgressBar()
    bar_strength.setRange(0, 100)
    bar_strength.setTextVisible(False)
    lbl_strength = QLabel()

    btn_minus = QPushButton("−")
    spin_len = QSpinBox()
    spin_len.setRange(MIN_UI_LENGTH, MAX_UI_LENGTH)
    spin_len.setValue(clamp_length(config.length))
    btn_plus = QPushButton("+")

    toggles = {}
    for i, (cls, short, desc) in enumerate(TOGGLES):
        btn = QPushButton(f"{short}\n{desc}")
        btn.setCheckable(True)
        btn.setChecked(config.is_enabled(cls))
        toggles[cls] = btn
        layout.addWidget(btn, 5, i)

    layout.addWidget(txt_password, 0, 0, 1, 2)
    layout.addWidget(lbl_warning, 0, 0, 1, 2)
    layout.addWidget(btn_copy, 0, 2)
    layout.addWidget(btn_regenerate, 0, 3)
    layout.addWidget(bar_strength, 1, 0, 1, 3)
    layout.addWidget(lbl_strength, 1, 3)
    layout.addWidget(QLabel("Password Length"), 2, 0, 1, 4)
    layout.addWidget(btn_minus, 3, 0)
    layout.addWidget(spin_len, 3, 1, 1, 2)
    layout.addWidget(btn_plus, 3, 3)
    layout.addWidget(QLabel("Character Types"), 4, 0, 1, 4)

    return {
        "widget": box,
        "txt_password": txt_password,
        "lbl_warning": lbl_warning,
        "btn_copy": btn_copy,
        "btn_regenerate": btn_regenerate,
        "bar_strength": bar_strength,
        "lbl_strength": lbl_strength,
        "btn_minus": btn_minus,
        "spin_len": spin_len,
        "btn_plus": btn_plus,
        "toggles": toggles,
    }


class StrongPassGUI(QWidget):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("StrongPass — Password Generator")
        self.setMinimumSize(520, 360)
        self.toast_timer: typing.Optional[QTimer] = None

        # read config
        self.cfg = load_config()
        self.theme = self.cfg.get("theme", "light")

        main = QVBoxLayout()
        self.setLayout(main)

        clock = make_clock_group()
        gen = make_generator_group(generation_config_from(self.cfg))
        self.lbl_toast = QLabel("✓ Password copied")
        self.lbl_toast.setAlignment(Qt.AlignCenter)
        self.lbl_toast.setVisible(False)
        footer = QLabel("Passwords are generated locally using cryptographic randomness")
        footer.setAlignment(Qt.AlignCenter)

        main.addWidget(clock["widget"])
        main.addWidget(gen["widget"], 1)
        main.addWidget(self.lbl_toast)
        main.addWidget(footer)

        # Wire up generator controls
        gen["btn_regenerate"].clicked.connect(self.regenerate)
        gen["btn_copy"].clicked.connect(self.on_copy)
        gen["btn_minus"].clicked.connect(partial(self.on_adjust_length, -1))
        gen["btn_plus"].clicked.connect(partial(self.on_adjust_length, 1))
        gen["spin_len"].valueChanged.connect(self.on_config_changed)
        for btn in gen["toggles"].values():
            btn.toggled.connect(self.on_config_changed)
        clock["btn_theme"].clicked.connect(self.on_toggle_theme)

        # store references
        self.gen = gen
        self.clock = clock

        # live clock
        self.clock_timer = QTimer(self)
        self.clock_timer.timeout.connect(self.on_tick)
        self.clock_timer.start(TICK_MS)

        self.apply_theme()
        self.on_tick()
        self.on_config_changed()

    # ----------------- Generator -----------------
    def current_config(self) -> GenerationConfig:
        toggles = self.gen["toggles"]
        return GenerationConfig(
            length=self.gen["spin_len"].value(),
            uppercase=toggles[CharacterClass.UPPERCASE].isChecked(),
            lowercase=toggles[CharacterClass.LOWERCASE].isChecked(),
            digits=toggles[CharacterClass.DIGIT].isChecked(),
            symbols=toggles[CharacterClass.SYMBOL].isChecked(),
        )

    def regenerate(self):
        config = self.current_config()
        valid = config.has_any_class()
        self.gen["txt_password"].setVisible(valid)
        self.gen["lbl_warning"].setVisible(not valid)
        self.gen["btn_copy"].setEnabled(valid)
        self.gen["btn_regenerate"].setEnabled(valid)
        if not valid:
            self.gen["txt_password"].setText("")
            self.show_strength(NONE_RESULT)
            return
        pw = generate(config)
        self.gen["txt_password"].setText(pw)
        self.show_strength(score(pw))

    def show_strength(self, result: StrengthResult):
        self.gen["bar_strength"].setValue(result.score)
        self.gen["bar_strength"].setStyleSheet(
            f"QProgressBar::chunk {{ background-color: {result.color}; }}"
        )
        self.gen["lbl_strength"].setText(result.label)
        self.gen["lbl_strength"].setStyleSheet(f"color: {result.color};")

    def on_config_changed(self, *_):
        spin = self.gen["spin_len"]
        self.gen["btn_minus"].setEnabled(spin.value() > MIN_UI_LENGTH)
        self.gen["btn_plus"].setEnabled(spin.value() < MAX_UI_LENGTH)
        self.regenerate()

    def on_adjust_length(self, delta: int):
        spin = self.gen["spin_len"]
        spin.setValue(clamp_length(spin.value() + delta))

    # ----------------- Clipboard -----------------
    def on_copy(self):
        pw = self.gen["txt_password"].text()
        if not pw:
            return
        clipboard: QClipboard = QApplication.clipboard()
        clipboard.setText(pw, mode=QClipboard.Clipboard)

        btn = self.gen["btn_copy"]
        btn.setText("Copied ✓")
        QTimer.singleShot(COPIED_FEEDBACK_MS, lambda: btn.setText("Copy"))
        self.show_toast()

    def show_toast(self):
        if self.toast_timer and self.toast_timer.isActive():
            self.toast_timer.stop()
        self.lbl_toast.setVisible(True)
        self.toast_timer = QTimer(self)
        self.toast_timer.setSingleShot(True)
        self.toast_timer.timeout.connect(lambda: self.lbl_toast.setVisible(False))
        self.toast_timer.start(TOAST_MS)

    # ----------------- Theme -----------------
    def apply_theme(self):
        self.setStyleSheet(THEMES.get(self.theme, THEMES["light"]))
        self.clock["btn_theme"].setText("Light mode" if self.theme == "dark" else "Dark mode")

    def on_toggle_theme(self):
        self.theme = "light" if self.theme == "dark" else "dark"
        self.apply_theme()
        self.cfg["theme"] = self.theme
        try:
            save_config(self.cfg)
        except ConfigFileError as e:
            logger.warning("Theme not saved: %s", e)

    # ----------------- Clock -----------------
    def on_tick(self):
        time_text, date_text = now_strings()
        self.clock["lbl_time"].setText(time_text)
        self.clock["lbl_date"].setText(date_text)


def main():
    setup_logging(verbose=False)
    app = QApplication(sys.argv)
    gui = StrongPassGUI()
    gui.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
