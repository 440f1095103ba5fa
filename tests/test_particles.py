# tests/test_particles.py
import unittest

import numpy as np

from brick_breaker.particles import ParticleSystem


class TestParticleSystem(unittest.TestCase):
    def setUp(self):
        self.particles = ParticleSystem(np.random.default_rng(7))

    def test_spawn_burst(self):
        self.particles.spawn(100, 50, (255, 0, 110))
        self.assertEqual(len(self.particles), 8)
        for p in self.particles:
            self.assertEqual((p.x, p.y), (100, 50))
            self.assertEqual(p.life, 1.0)
            self.assertEqual(p.color, (255, 0, 110))
            self.assertTrue(-3 <= p.dx < 3)
            self.assertTrue(-3 <= p.dy < 3)
            self.assertTrue(1 <= p.radius < 4)

    def test_update_moves_and_decays(self):
        self.particles.spawn(0, 0, (1, 2, 3))
        before = [(p.dx, p.dy) for p in self.particles]
        self.particles.update()
        for p, (dx, dy) in zip(self.particles, before):
            self.assertAlmostEqual(p.x, dx)
            self.assertAlmostEqual(p.y, dy)
            self.assertAlmostEqual(p.life, 0.97)

    def test_particles_expire(self):
        self.particles.spawn(0, 0, (1, 2, 3))
        for _ in range(30):
            self.particles.update()
        self.assertEqual(len(self.particles), 8)
        for _ in range(10):
            self.particles.update()
        self.assertEqual(len(self.particles), 0)

    def test_removal_keeps_younger_bursts(self):
        self.particles.spawn(0, 0, (1, 2, 3))
        for _ in range(20):
            self.particles.update()
        self.particles.spawn(10, 10, (4, 5, 6))
        for _ in range(15):
            self.particles.update()
        self.assertEqual(len(self.particles), 8)
        self.assertTrue(all(p.color == (4, 5, 6) for p in self.particles))

    def test_clear(self):
        self.particles.spawn(0, 0, (1, 2, 3))
        self.particles.clear()
        self.assertEqual(len(self.particles), 0)


if __name__ == "__main__":
    unittest.main()
