# Файл: fadeforge/main_window.py
# Определяет класс FadeEditorWindow, который является главным окном приложения.

import os

from PySide6.QtWidgets import (
    QMainWindow, QLabel, QFileDialog, QScrollArea,
    QMessageBox, QSizePolicy, QToolBar, QDockWidget,
    QVBoxLayout, QWidget, QPushButton, QHBoxLayout,
    QComboBox, QCheckBox, QFrame, QStyle
)
from PySide6.QtGui import QPixmap, QGuiApplication, QIcon, QKeySequence, QCloseEvent
from PySide6.QtCore import Qt, Slot, QDir, QSize
from PIL import ImageQt

from . import config
from . import image_operations
from .errors import FadeForgeError
from .gradient_settings import GradientShape
from .logging_setup import get_logger
from .session import FadeSession
from .ui_utils import LabeledSlider, create_action

logger = get_logger("main_window")


class FadeEditorWindow(QMainWindow):
    """
    Главное окно приложения.

    Слева панель параметров градиента, в центре предпросмотр результата на
    шахматном фоне. Любое изменение параметров сразу перестраивает предпросмотр.
    """
    def __init__(self, resources_path, session=None):
        """
        Инициализирует главное окно.

        Args:
            resources_path (str): Путь к папке с ресурсами приложения (иконки, стили).
            session (FadeSession | None): Состояние редактора; по умолчанию создаётся новое.
        """
        super().__init__()
        self.resources_path = resources_path
        self.icons_path = os.path.join(self.resources_path, "icons")
        self.session = session or FadeSession()
        self.last_directory = QDir.homePath()

        self.setWindowTitle(config.APP_NAME)
        screen = QGuiApplication.primaryScreen()
        if screen:
            screen_geometry = screen.availableGeometry()
            self.setGeometry(screen_geometry.width() // 8, screen_geometry.height() // 8,
                             screen_geometry.width() * 3 // 4, screen_geometry.height() * 3 // 4)
        else:
            self.setGeometry(100, 100, 1024, 768)

        self.current_pixmap_for_zoom = None
        self.current_zoom_factor = 1.0

        self.image_label = QLabel("Откройте изображение (Ctrl+O)")
        self.image_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.image_label.setSizePolicy(QSizePolicy.Policy.Preferred, QSizePolicy.Policy.Preferred)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.scroll_area.setWidget(self.image_label)
        self.setCentralWidget(self.scroll_area)

        self._create_actions()
        self._create_menus()
        self._create_toolbar()
        self._create_settings_panel()

        self.session.image_changed.connect(self.on_image_changed)
        self.session.settings_changed.connect(self.on_settings_changed)

        self.statusBar().showMessage("Готово к работе!")
        self._update_actions_enabled_state()

    def _get_icon(self, name: str, fallback=None) -> QIcon:
        """Иконка из папки ресурсов или стандартная иконка Qt, если файла нет."""
        icon_path = os.path.join(self.icons_path, name)
        if os.path.exists(icon_path):
            return QIcon(icon_path)
        if fallback is not None:
            return self.style().standardIcon(fallback)
        return QIcon()

    def _create_actions(self):
        """Создает все QAction для меню и панели инструментов."""
        self.open_action = create_action(
            self, "&Открыть...", self.open_image_dialog, QKeySequence.StandardKey.Open,
            self._get_icon("open.png", QStyle.StandardPixmap.SP_DialogOpenButton),
            "Открыть изображение")

        self.export_action = create_action(
            self, "&Экспорт PNG...", self.export_image_dialog, QKeySequence.StandardKey.Save,
            self._get_icon("save.png", QStyle.StandardPixmap.SP_DialogSaveButton),
            "Сохранить результат как PNG с прозрачностью")

        self.close_image_action = create_action(
            self, "&Закрыть изображение", self.close_image, QKeySequence.StandardKey.Close,
            self._get_icon("close.png", QStyle.StandardPixmap.SP_DialogCloseButton),
            "Закрыть текущее изображение")

        self.exit_action = create_action(
            self, "&Выход", self.close, QKeySequence.StandardKey.Quit,
            tip="Выйти из приложения")

        self.reset_settings_action = create_action(
            self, "&Сбросить параметры", self.reset_settings, QKeySequence("Ctrl+R"),
            self._get_icon("reset.png", QStyle.StandardPixmap.SP_BrowserReload),
            "Вернуть параметры градиента по умолчанию")

        self.zoom_in_action = create_action(
            self, "Увеличить (+)", lambda: self.zoom_image_on_display(1.25), QKeySequence.StandardKey.ZoomIn,
            self._get_icon("zoom_in.png", QStyle.StandardPixmap.SP_ArrowUp), "Увеличить масштаб отображения")

        self.zoom_out_action = create_action(
            self, "Уменьшить (-)", lambda: self.zoom_image_on_display(0.8), QKeySequence.StandardKey.ZoomOut,
            self._get_icon("zoom_out.png", QStyle.StandardPixmap.SP_ArrowDown), "Уменьшить масштаб отображения")

        self.actual_size_action = create_action(
            self, "Реальный &размер (100%)", self.set_actual_image_size, QKeySequence("Ctrl+0"),
            tip="Показать изображение в реальном размере (100%)")

    def _create_menus(self):
        """Создает и наполняет главное меню приложения."""
        file_menu = self.menuBar().addMenu("&Файл")
        file_menu.addAction(self.open_action)
        file_menu.addAction(self.export_action)
        file_menu.addAction(self.close_image_action)
        file_menu.addSeparator()
        file_menu.addAction(self.exit_action)

        gradient_menu = self.menuBar().addMenu("&Градиент")
        gradient_menu.addAction(self.reset_settings_action)

        view_menu = self.menuBar().addMenu("&Вид")
        view_menu.addAction(self.zoom_in_action)
        view_menu.addAction(self.zoom_out_action)
        view_menu.addAction(self.actual_size_action)

    def _create_toolbar(self):
        """Создает главную панель инструментов."""
        toolbar = QToolBar("Основная панель инструментов")
        toolbar.setMovable(True)
        toolbar.setIconSize(QSize(24, 24))
        self.addToolBar(Qt.ToolBarArea.TopToolBarArea, toolbar)

        toolbar.addAction(self.open_action)
        toolbar.addAction(self.export_action)
        toolbar.addAction(self.close_image_action)
        toolbar.addSeparator()
        toolbar.addAction(self.reset_settings_action)
        toolbar.addSeparator()
        toolbar.addAction(self.zoom_in_action)
        toolbar.addAction(self.zoom_out_action)

    def _create_settings_panel(self):
        """Создает панель (DockWidget) с параметрами градиента."""
        self.settings_dock_widget = QDockWidget("Параметры градиента", self)
        self.settings_dock_widget.setAllowedAreas(Qt.DockWidgetArea.LeftDockWidgetArea | Qt.DockWidgetArea.RightDockWidgetArea)

        panel = QWidget()
        layout = QVBoxLayout(panel)
        settings = self.session.settings

        self.file_info_label = QLabel()
        self.file_info_label.setWordWrap(True)
        layout.addWidget(self.file_info_label)
        layout.addWidget(self._separator())

        self.shape_combo = QComboBox()
        self.shape_combo.addItem("Линейный", GradientShape.LINEAR)
        self.shape_combo.addItem("Радиальный", GradientShape.RADIAL)
        self.shape_combo.currentIndexChanged.connect(self.on_shape_changed)
        layout.addWidget(QLabel("Форма"))
        layout.addWidget(self.shape_combo)

        self.angle_slider = LabeledSlider("Угол", *config.ANGLE_RANGE, settings.angle, "°")
        self.angle_slider.valueChanged.connect(lambda v: self.session.update_settings(angle=v))
        layout.addWidget(self.angle_slider)

        layout.addWidget(self._separator())
        layout.addWidget(QLabel("Зона перехода"))

        self.fade_start_slider = LabeledSlider("Начало (непрозрачно)", *config.PERCENT_RANGE, settings.fade_start, "%")
        self.fade_start_slider.valueChanged.connect(lambda v: self.session.update_settings(fade_start=v))
        layout.addWidget(self.fade_start_slider)

        self.fade_end_slider = LabeledSlider("Конец (прозрачно)", *config.PERCENT_RANGE, settings.fade_end, "%")
        self.fade_end_slider.valueChanged.connect(lambda v: self.session.update_settings(fade_end=v))
        layout.addWidget(self.fade_end_slider)

        layout.addWidget(self._separator())

        self.invert_checkbox = QCheckBox("Инвертировать направление")
        self.invert_checkbox.toggled.connect(lambda checked: self.session.update_settings(invert=checked))
        layout.addWidget(self.invert_checkbox)

        buttons_layout = QHBoxLayout()
        reset_btn = QPushButton(self.reset_settings_action.icon(), "Сбросить")
        reset_btn.clicked.connect(self.reset_settings)
        buttons_layout.addWidget(reset_btn)
        buttons_layout.addStretch()
        layout.addLayout(buttons_layout)
        layout.addStretch()

        self.settings_dock_widget.setWidget(panel)
        self.addDockWidget(Qt.DockWidgetArea.LeftDockWidgetArea, self.settings_dock_widget)
        self._sync_controls_with_settings()
        self._update_file_info()

    @staticmethod
    def _separator():
        line = QFrame()
        line.setFrameShape(QFrame.Shape.HLine)
        line.setFrameShadow(QFrame.Shadow.Sunken)
        return line

    def _sync_controls_with_settings(self):
        """Переносит текущие настройки сессии в элементы управления без обратных сигналов."""
        settings = self.session.settings
        self.angle_slider.set_value_silently(settings.angle)
        self.fade_start_slider.set_value_silently(settings.fade_start)
        self.fade_end_slider.set_value_silently(settings.fade_end)

        self.shape_combo.blockSignals(True)
        self.shape_combo.setCurrentIndex(self.shape_combo.findData(settings.shape))
        self.shape_combo.blockSignals(False)

        self.invert_checkbox.blockSignals(True)
        self.invert_checkbox.setChecked(settings.invert)
        self.invert_checkbox.blockSignals(False)

        # Угол имеет смысл только для линейного градиента
        self.angle_slider.setEnabled(settings.shape == GradientShape.LINEAR)

    def _update_file_info(self):
        image = self.session.source_image
        if image is None:
            self.file_info_label.setText("Изображение не загружено")
        else:
            self.file_info_label.setText(f"{self.session.file_name}\n{image.width} × {image.height} px")

    @Slot(int)
    def on_shape_changed(self, index):
        shape = self.shape_combo.itemData(index)
        if shape is not None:
            self.session.update_settings(shape=shape)

    @Slot(object)
    def on_settings_changed(self, settings):
        self._sync_controls_with_settings()
        self.update_preview()

    @Slot()
    def on_image_changed(self):
        self.current_zoom_factor = 1.0
        self._update_file_info()
        self.update_preview()

    @Slot()
    def open_image_dialog(self):
        """Открывает диалог выбора изображения и загружает его в сессию."""
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Открыть изображение", self.last_directory, config.OPEN_FILE_FILTER)
        if not file_path:
            return
        try:
            self.session.load_file(file_path)
            self.last_directory = os.path.dirname(file_path)
            self.statusBar().showMessage(f"Открыто: {file_path}")
        except FileNotFoundError:
            QMessageBox.critical(self, "Ошибка", f"Файл не найден: {file_path}")
        except (FadeForgeError, OSError) as e:
            logger.warning("Не удалось открыть %s: %s", file_path, e)
            QMessageBox.critical(self, "Ошибка открытия", f"Ошибка при открытии файла '{file_path}': {e}")
        finally:
            self._update_actions_enabled_state()

    @Slot()
    def export_image_dialog(self):
        """Сохраняет результат в PNG. Имя по умолчанию: исходное имя + суффикс."""
        if not self.session.has_image():
            QMessageBox.warning(self, "Внимание", "Нет изображения для экспорта.")
            return

        default_path = os.path.join(self.last_directory, self.session.export_file_name())
        file_path, _ = QFileDialog.getSaveFileName(
            self, "Экспорт PNG", default_path, config.SAVE_FILE_FILTER)
        if not file_path:
            return
        try:
            saved_path = self.session.save(file_path)
            self.statusBar().showMessage(f"Экспортировано в: {saved_path}")
        except FadeForgeError as e:
            logger.error("Экспорт не удался: %s", e)
            QMessageBox.critical(self, "Ошибка экспорта", f"Не удалось сохранить: {e}")

    @Slot()
    def close_image(self):
        self.session.clear_image()
        self.statusBar().showMessage("Изображение закрыто.")
        self._update_actions_enabled_state()

    @Slot()
    def reset_settings(self):
        self.session.reset_settings()
        self.statusBar().showMessage("Параметры сброшены.")

    def update_preview(self):
        """Перестраивает предпросмотр по текущим настройкам сессии."""
        if not self.session.has_image():
            self.image_label.clear()
            self.image_label.setText("Откройте изображение (Ctrl+O)")
            self.current_pixmap_for_zoom = None
            self._update_actions_enabled_state()
            return

        try:
            faded = self.session.render()
            preview = image_operations.checkerboard_preview(faded)
            self.current_pixmap_for_zoom = QPixmap.fromImage(ImageQt.ImageQt(preview))
            self._show_scaled_pixmap()
        except FadeForgeError as e:
            logger.error("Не удалось построить предпросмотр: %s", e)
            self.image_label.setText("Ошибка отображения")
            self.current_pixmap_for_zoom = None
            QMessageBox.critical(self, "Ошибка отображения", f"Не удалось построить предпросмотр: {e}")
        self._update_actions_enabled_state()

    def _show_scaled_pixmap(self):
        if self.current_pixmap_for_zoom is None:
            return
        if abs(self.current_zoom_factor - 1.0) > 1e-5:
            scaled_width = int(self.current_pixmap_for_zoom.width() * self.current_zoom_factor)
            scaled_height = int(self.current_pixmap_for_zoom.height() * self.current_zoom_factor)
            if scaled_width > 0 and scaled_height > 0:
                self.image_label.setPixmap(self.current_pixmap_for_zoom.scaled(
                    scaled_width, scaled_height,
                    Qt.AspectRatioMode.KeepAspectRatio,
                    Qt.TransformationMode.SmoothTransformation))
                return
        self.image_label.setPixmap(self.current_pixmap_for_zoom)

    def zoom_image_on_display(self, factor: float):
        if self.current_pixmap_for_zoom is None:
            return
        self.current_zoom_factor = min(max(self.current_zoom_factor * factor, 0.05), 16.0)
        self._show_scaled_pixmap()
        self.statusBar().showMessage(f"Масштаб: {self.current_zoom_factor * 100:.0f}%")

    def set_actual_image_size(self):
        self.current_zoom_factor = 1.0
        self._show_scaled_pixmap()
        self.statusBar().showMessage("Масштаб: 100%")

    def _update_actions_enabled_state(self):
        has_image = self.session.has_image()
        self.export_action.setEnabled(has_image)
        self.close_image_action.setEnabled(has_image)
        self.zoom_in_action.setEnabled(has_image)
        self.zoom_out_action.setEnabled(has_image)
        self.actual_size_action.setEnabled(has_image)

    def closeEvent(self, event: QCloseEvent):
        logger.debug("Окно закрыто")
        event.accept()
