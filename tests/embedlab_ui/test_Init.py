import unittest
from unittest.mock import Mock, patch

import pygame

from embedlab_ui.Init import Init


class TestInit(unittest.TestCase):
    @patch('embedlab_ui.Init.Settings')
    def test_settings_creates_and_saves_settings(self, mock_settings_class):
        mock_settings_instance = Mock()
        mock_settings_class.return_value = mock_settings_instance

        result = Init.settings("test_path.toml")

        mock_settings_class.assert_called_once_with("test_path.toml")
        mock_settings_instance.save.assert_called_once()
        self.assertEqual(result, mock_settings_instance)

    @patch('embedlab_ui.Init.Settings')
    def test_settings_with_default_path(self, mock_settings_class):
        Init.settings()

        mock_settings_class.assert_called_once_with("settings.toml")

    @patch('pygame.key.set_repeat')
    @patch('embedlab_ui.Init.time')
    @patch('embedlab_ui.Init.display')
    def test_ui_windowed(self, mock_display, mock_time, mock_set_repeat):
        screen = Mock()
        mock_display.set_mode.return_value = screen

        result = Init.ui((1024, 640), "EmbedLab")

        mock_display.set_mode.assert_called_once_with((1024, 640), pygame.DOUBLEBUF | pygame.SCALED)
        mock_display.set_caption.assert_called_once_with("EmbedLab")
        mock_set_repeat.assert_called_once()
        self.assertEqual(result, (screen, mock_time.Clock.return_value))

    @patch('pygame.key.set_repeat')
    @patch('embedlab_ui.Init.time')
    @patch('embedlab_ui.Init.display')
    def test_ui_fullscreen_flag(self, mock_display, mock_time, mock_set_repeat):
        Init.ui((1024, 640), "EmbedLab", fullscreen=True)

        flags = mock_display.set_mode.call_args[0][1]
        self.assertTrue(flags & pygame.FULLSCREEN)

    @patch('embedlab_ui.Init.display')
    def test_ui_display_error(self, mock_display):
        mock_display.set_mode.side_effect = pygame.error("No available video device")

        with self.assertRaises(RuntimeError) as cm:
            Init.ui((1024, 640), "EmbedLab")

        self.assertEqual(str(cm.exception), "Display error: No available video device")


if __name__ == "__main__":
    unittest.main()
