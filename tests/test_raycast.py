import pytest

from wolfcast.config import Direction
from wolfcast.player import Player
from wolfcast.raycast import Renderer, cast_ray

WIDTH, HEIGHT, TEX = 16, 12, 4
WALL_COLOR = 0x123456


def _box(size=5):
    inner = [[1] + [0] * (size - 2) + [1] for _ in range(size - 2)]
    return [[1] * size] + inner + [[1] * size]


def _textures(side=WALL_COLOR, front=0xFEFEFE):
    return {
        Direction.NORTH: [front] * (TEX * TEX),
        Direction.SOUTH: [front] * (TEX * TEX),
        Direction.WEST: [side] * (TEX * TEX),
        Direction.EAST: [side] * (TEX * TEX),
    }


def test_centre_ray_hits_wall_ahead():
    grid = _box()
    player = Player.from_start(2, 2, Direction.NORTH)
    ray = cast_ray(player, grid, WIDTH // 2, WIDTH, HEIGHT)
    assert ray.camera == 0
    assert ray.face() is Direction.NORTH
    assert grid[ray.map_y][ray.map_x] == 1
    assert ray.distance == pytest.approx(player.y - 1)
    assert ray.wall_x == pytest.approx(player.x % 1)


@pytest.mark.parametrize("direction", list(Direction))
def test_centre_ray_face_matches_view(direction):
    player = Player.from_start(2, 2, direction)
    ray = cast_ray(player, _box(), WIDTH // 2, WIDTH, HEIGHT)
    assert ray.face() is direction


def test_every_column_stays_on_screen():
    player = Player.from_start(2, 1, Direction.EAST)
    player.turn_right()
    for x in range(WIDTH):
        ray = cast_ray(player, _box(), x, WIDTH, HEIGHT)
        assert 0 <= ray.draw_start <= ray.draw_end <= HEIGHT - 1
        assert 0 <= ray.wall_x < 1


def test_render_side_wall_unshaded():
    renderer = Renderer(_textures(), WIDTH, HEIGHT, TEX)
    frame = renderer.render(Player.from_start(2, 2, Direction.EAST), _box())
    assert len(frame) == HEIGHT
    assert all(len(row) == WIDTH for row in frame)
    assert frame[HEIGHT // 2][WIDTH // 2] == WALL_COLOR


def test_render_front_wall_is_shaded():
    renderer = Renderer(_textures(), WIDTH, HEIGHT, TEX)
    frame = renderer.render(Player.from_start(2, 2, Direction.NORTH), _box())
    assert frame[HEIGHT // 2][WIDTH // 2] == 0x7F7F7F


def test_negative_texture_pixels_are_skipped():
    renderer = Renderer(_textures(side=-1), WIDTH, HEIGHT, TEX)
    frame = renderer.render(Player.from_start(2, 2, Direction.EAST), _box())
    assert [row[WIDTH // 2] for row in frame] == [0] * HEIGHT


def test_draw_column_matches_render():
    renderer = Renderer(_textures(), WIDTH, HEIGHT, TEX)
    player = Player.from_start(2, 2, Direction.WEST)
    rendered = renderer.render(player, _box())
    frame = [[0] * WIDTH for _ in range(HEIGHT)]
    renderer.draw_column(frame, cast_ray(player, _box(), 3, WIDTH, HEIGHT), 3)
    assert [row[3] for row in frame] == [row[3] for row in rendered]


def test_compose_fills_background():
    renderer = Renderer(_textures(), WIDTH, HEIGHT, TEX)
    blank = [[0] * WIDTH for _ in range(HEIGHT)]
    image = renderer.compose(blank, 0xAA, 0xBB)
    assert all(row == [0xAA] * WIDTH for row in image[: HEIGHT // 2])
    assert all(row == [0xBB] * WIDTH for row in image[HEIGHT // 2 : HEIGHT - 1])
    assert image[HEIGHT - 1] == [0] * WIDTH


def test_compose_keeps_wall_pixels():
    renderer = Renderer(_textures(), WIDTH, HEIGHT, TEX)
    frame = renderer.render(Player.from_start(2, 2, Direction.EAST), _box())
    image = renderer.compose(frame, 0xAA, 0xBB)
    assert image[HEIGHT // 2][WIDTH // 2] == WALL_COLOR


def test_texture_size_must_be_power_of_two():
    with pytest.raises(ValueError):
        Renderer(_textures(), WIDTH, HEIGHT, 3)


def test_missing_texture_rejected():
    textures = _textures()
    del textures[Direction.SOUTH]
    with pytest.raises(ValueError):
        Renderer(textures, WIDTH, HEIGHT, TEX)


def test_small_texture_rejected():
    with pytest.raises(ValueError):
        Renderer(_textures(), WIDTH, HEIGHT, TEX * 2)