#!/usr/bin/env python3
"""
Test Suite for the sound cues

The pygame mixer is patched so these run without an audio device.
"""

import unittest
from unittest import mock

import numpy as np
import pygame

from ascii_invaders.config import CUES
from ascii_invaders.sound import Synth, register_cues


class TestSynthWithoutAudio(unittest.TestCase):
    """A mixer that won't start must not take the game down."""

    def setUp(self):
        patcher = mock.patch('pygame.mixer.init', side_effect=pygame.error("no audio device"))
        patcher.start()
        self.addCleanup(patcher.stop)
        self.synth = Synth()

    def test_disabled(self):
        self.assertFalse(self.synth.enabled)

    def test_add_and_play_are_noops(self):
        self.assertFalse(self.synth.add('pew'))
        self.synth.play('pew')
        self.synth.wait()
        self.synth.close()
        self.assertEqual(self.synth.sounds, {})


class TestSynth(unittest.TestCase):
    """Cue registration and playback with a stubbed mixer."""

    def setUp(self):
        for target, kwargs in (
            ('pygame.mixer.init', {}),
            ('pygame.mixer.quit', {}),
            ('pygame.mixer.get_busy', {'return_value': False}),
            ('pygame.sndarray.make_sound', {'side_effect': lambda _: mock.MagicMock()}),
        ):
            patcher = mock.patch(target, **kwargs)
            patcher.start()
            self.addCleanup(patcher.stop)
        self.synth = Synth()

    def test_register_all_cues(self):
        """Missing sound files fall back to synthesized cues."""
        register_cues(self.synth, '/nonexistent/sounds')
        self.assertEqual(sorted(self.synth.sounds), sorted(CUES))

    def test_unknown_cue(self):
        self.assertFalse(self.synth.add('laser'))
        self.synth.play('laser')  # Not registered, nothing to play

    def test_play(self):
        self.assertTrue(self.synth.add('pew'))
        self.synth.play('pew')
        self.synth.sounds['pew'].play.assert_called_once_with()

    def test_unloadable_file_falls_back(self):
        with mock.patch('os.path.exists', return_value=True), \
                mock.patch('pygame.mixer.Sound', side_effect=pygame.error("bad wav")):
            self.assertTrue(self.synth.add('win', '/tmp/win.wav'))
        self.assertIn('win', self.synth.sounds)

    def test_wait_returns_when_idle(self):
        self.synth.wait(timeout=1.0)
        pygame.mixer.get_busy.assert_called()

    def test_recipes_are_bounded(self):
        """Every cue waveform is a non-empty mono signal within [-1, 1]."""
        for name, recipe in self.synth.recipes.items():
            wave = recipe()
            self.assertEqual(wave.ndim, 1, name)
            self.assertGreater(len(wave), 0, name)
            self.assertLessEqual(np.max(np.abs(wave)), 1.0, name)


if __name__ == '__main__':
    unittest.main(verbosity=2)
