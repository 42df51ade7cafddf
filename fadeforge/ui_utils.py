# Файл: fadeforge/ui_utils.py
# Небольшие фабрики виджетов для главного окна.
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QIcon
from PySide6.QtWidgets import QHBoxLayout, QLabel, QSlider, QVBoxLayout, QWidget


def create_action(parent, text, slot=None, shortcut=None, icon=None, tip=None):
    action = QAction(text, parent)
    if icon is not None:
        action.setIcon(icon if isinstance(icon, QIcon) else QIcon(icon))
    if slot: action.triggered.connect(slot)
    if shortcut is not None: action.setShortcut(shortcut)
    if tip:
        action.setToolTip(tip)
        action.setStatusTip(tip)
    return action


class LabeledSlider(QWidget):
    """Горизонтальный слайдер с подписью и текущим значением (например, 'Угол  180°')."""

    def __init__(self, label, minimum, maximum, value, unit="", parent=None):
        super().__init__(parent)
        self.unit = unit

        self.slider = QSlider(Qt.Orientation.Horizontal)
        self.slider.setRange(minimum, maximum)
        self.slider.setSingleStep(1)
        self.slider.setValue(int(round(value)))

        self.value_label = QLabel()
        self.value_label.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        self._update_value_label(self.slider.value())
        self.slider.valueChanged.connect(self._update_value_label)

        header = QHBoxLayout()
        header.setContentsMargins(0, 0, 0, 0)
        header.addWidget(QLabel(label))
        header.addStretch()
        header.addWidget(self.value_label)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addLayout(header)
        layout.addWidget(self.slider)

    @property
    def valueChanged(self):
        return self.slider.valueChanged

    def value(self):
        return self.slider.value()

    def set_value_silently(self, value):
        """Устанавливает значение без отправки valueChanged."""
        self.slider.blockSignals(True)
        self.slider.setValue(int(round(value)))
        self.slider.blockSignals(False)
        self._update_value_label(self.slider.value())

    def _update_value_label(self, value):
        self.value_label.setText(f"{value}{self.unit}")
