"""
Main window for Segmented Time Input
示範表單：必填的時間欄位
"""

import logging

from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QCheckBox, QMessageBox
)
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont

import config
from forms import FormControl, Validators
from gui.widgets.time_input import TimeInputWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """主視窗 - Segmented Time Input"""

    def __init__(self):
        super().__init__()
        # 表單欄位（必填）
        self.time_control = FormControl(None, validators=[Validators.required])
        self.init_ui()
        self.setup_menu()
        self.time_control.bind(self.time_input.controller)
        self.time_control.add_value_listener(self._on_form_value_changed)
        self._update_status()
        logger.info("MainWindow initialized")

    def init_ui(self):
        """初始化 UI"""
        self.setWindowTitle(config.APP_TITLE)
        self.setGeometry(100, 100, config.WINDOW_WIDTH, config.WINDOW_HEIGHT)

        central_widget = QWidget()
        layout = QVBoxLayout()

        # 標題
        title = QLabel(config.APP_TITLE)
        title.setFont(QFont('Arial', 18, QFont.Bold))
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)

        # 時間輸入
        self.time_input = TimeInputWidget(
            label=config.FIELD_LABEL,
            twelve_hour_format=config.TWELVE_HOUR_FORMAT,
        )
        self.time_input.controller.set_placeholder(config.FIELD_PLACEHOLDER)
        self.time_input.touched.connect(self._update_status)
        layout.addWidget(self.time_input)

        # 錯誤訊息
        self.error_label = QLabel('')
        self.error_label.setStyleSheet("color: #e53935;")
        layout.addWidget(self.error_label)

        # 設定區
        option_layout = QHBoxLayout()

        self.twelve_hour_check = QCheckBox('12 小時制')
        self.twelve_hour_check.setChecked(config.TWELVE_HOUR_FORMAT)
        self.twelve_hour_check.toggled.connect(self.on_twelve_hour_toggled)
        option_layout.addWidget(self.twelve_hour_check)

        self.disabled_check = QCheckBox('停用')
        self.disabled_check.toggled.connect(self.on_disabled_toggled)
        option_layout.addWidget(self.disabled_check)

        copy_btn = QPushButton('複製')
        copy_btn.clicked.connect(self.on_copy)
        option_layout.addWidget(copy_btn)

        clear_btn = QPushButton('清除')
        clear_btn.clicked.connect(self.on_clear)
        option_layout.addWidget(clear_btn)

        layout.addLayout(option_layout)

        # 目前值
        self.value_label = QLabel('')
        layout.addWidget(self.value_label)
        layout.addStretch()

        central_widget.setLayout(layout)
        self.setCentralWidget(central_widget)

        self.statusBar().showMessage('就緒')

    def setup_menu(self):
        """設置菜單欄"""
        menubar = self.menuBar()

        file_menu = menubar.addMenu('檔案')
        clear_action = file_menu.addAction('清除')
        clear_action.triggered.connect(self.on_clear)
        file_menu.addSeparator()
        exit_action = file_menu.addAction('離開')
        exit_action.triggered.connect(self.close)

        help_menu = menubar.addMenu('說明')
        about_action = help_menu.addAction('關於')
        about_action.triggered.connect(self.on_about)

    def on_twelve_hour_toggled(self, checked: bool):
        """切換時制"""
        self.time_input.twelve_hour_format = checked
        self.statusBar().showMessage('12 小時制' if checked else '24 小時制')

    def on_disabled_toggled(self, checked: bool):
        """停用/啟用欄位"""
        if checked:
            self.time_control.disable()
        else:
            self.time_control.enable()
        self._update_status()

    def on_copy(self):
        """複製目前顯示"""
        text = self.time_input.controller.copy()
        self.statusBar().showMessage(f'已複製：{text}')

    def on_clear(self):
        """清除時間"""
        self.time_control.set_value(None)
        self.statusBar().showMessage('已清除')

    def _on_form_value_changed(self, value):
        self._update_status()

    def _update_status(self):
        """更新值與錯誤顯示"""
        value = self.time_control.value
        if value is None:
            self.value_label.setText('目前值：無')
        else:
            self.value_label.setText(f'目前值：{value.hours:02d}:{value.minutes:02d}')

        show_error = self.time_control.touched and self.time_control.invalid
        if show_error:
            self.error_label.setText(self.time_control.errors[0].message)
        else:
            self.error_label.setText('')

    def on_about(self):
        """關於"""
        QMessageBox.about(
            self,
            '關於',
            f'{config.APP_TITLE}\n\n'
            '以鍵盤輸入時、分與上下午的時間欄位。'
        )

    def closeEvent(self, event):
        """關閉窗口"""
        self.time_input.controller.destroy()
        event.accept()
        logger.info("Application closed")


if __name__ == "__main__":
    import sys
    from PyQt5.QtWidgets import QApplication

    logging.basicConfig(
        level=logging.INFO,
        format=config.LOG_FORMAT
    )

    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec_())
