import logging
import gmath as gm
from gmath.utils import logger
import numpy as np


def create_simple_cube():
    """Вершины единичного куба (8 точек)."""
    vertices = np.array([
        -0.5, -0.5, 0.5,
        0.5, -0.5, 0.5,
        0.5, 0.5, 0.5,
        -0.5, 0.5, 0.5,
        -0.5, -0.5, -0.5,
        0.5, -0.5, -0.5,
        0.5, 0.5, -0.5,
        -0.5, 0.5, -0.5,
    ], dtype=np.float32)
    return [gm.Vec3(*p) for p in vertices.reshape(-1, 3)]


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.info("Starting minimal example...")

    width, height = 800, 600

    # Модель: куб на 4 единицы перед камерой, повёрнут по X и Y
    model = gm.Mat4.get_model(gm.Vec3(0, 0, 4), gm.Vec3(0.5, 0.7, 0.0))
    logger.info(f"Model matrix:\n{model.to_str()}")

    # Обратная модельная матрица возвращает точки в локальные координаты
    to_local = gm.Mat4.inverse(model)

    for vertex in create_simple_cube():
        world = gm.Vec3(*vertex.as_np()).multiply(model)
        pixel = world.project_viewport(width, height, gm.Config()["project_eps"])
        back = gm.Vec3(*world.as_np()).multiply(to_local)
        logger.info(f"{gm.format_vec(vertex)} -> px {pixel.x:.1f} {pixel.y:.1f}"
                    f" (local again: {back.almost_equal(vertex)})")
