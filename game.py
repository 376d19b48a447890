import logging

import pygame
from config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FPS,
    HUD_HEIGHT, PLAYFIELD_HEIGHT, DPAD_HEIGHT,
    COLOR_BG, COLOR_BUTTON, COLOR_HUD, COLOR_MUTED, COLOR_HINT, COLOR_FOOD,
    COLOR_STAR, COLOR_SNAKE_HEAD, COLOR_DIFFICULTY,
    HIGHSCORE_FILE, load_font,
)
from audio import AudioCues
from controls import (
    Action, DoubleTapDetector,
    translate_key, swipe_direction, menu_layout, menu_hit, dpad_layout, dpad_hit,
)
from effects import Effects
from food import FoodRenderer
from grid import build_background
from highscore import HighScoreStore
from session import Difficulty, Phase, Session
from snake import Direction, SnakeRenderer
from timer import TickTimer

logger = logging.getLogger(__name__)

DPAD_ARROWS = {
    Direction.UP: "^",
    Direction.DOWN: "v",
    Direction.LEFT: "<",
    Direction.RIGHT: ">",
}


class Game:
    def __init__(self, difficulty: Difficulty = Difficulty.MEDIUM, highscore_path=HIGHSCORE_FILE, sound: bool = True):
        pygame.init()
        pygame.display.set_caption("Snake")
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        self.clock = pygame.time.Clock()
        self.running = True

        self.timer = TickTimer()
        self.session = Session(self.timer, HighScoreStore(highscore_path), difficulty)
        self.audio = AudioCues(enabled=sound)
        self.effects = Effects()
        self.session.subscribe(self.audio)
        self.session.subscribe(self.effects)

        self.background = build_background(PLAYFIELD_HEIGHT)
        self.snake_renderer = SnakeRenderer()
        self.food_renderer = FoodRenderer()

        self.menu_rects = menu_layout()
        self.dpad_rects = dpad_layout()
        self.double_tap = DoubleTapDetector()
        self.touch_start: tuple[float, float] | None = None

        self.title_font = load_font(60)
        self.big_font = load_font(30)
        self.font = load_font(20)
        self.small_font = load_font(16)

    def dispatch(self, intent):
        """Route a translated intent to the session."""
        if intent is None:
            return
        if isinstance(intent, Direction):
            self.session.steer(intent)
        elif isinstance(intent, Difficulty):
            self.session.select_difficulty(intent)
        elif intent is Action.QUIT:
            self.running = False
        elif intent in (Action.START, Action.RESTART):
            self.effects.clear()
            self.session.start()
        elif intent is Action.PAUSE:
            self.session.toggle_pause()
        elif intent is Action.MENU:
            self.session.return_to_menu()
        elif intent is Action.PREVIOUS_DIFFICULTY:
            self.session.cycle_difficulty(-1)
        elif intent is Action.NEXT_DIFFICULTY:
            self.session.cycle_difficulty(1)

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == self.timer.event_type:
                self.session.tick()
            elif event.type == pygame.KEYDOWN:
                self.dispatch(translate_key(event.key, self.session.phase))
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.handle_click(event.pos)
            elif event.type == pygame.FINGERDOWN:
                self.handle_finger_down(self._finger_pos(event))
            elif event.type == pygame.FINGERUP:
                self.handle_finger_up(self._finger_pos(event))

    @staticmethod
    def _finger_pos(event) -> tuple[float, float]:
        return event.x * SCREEN_WIDTH, event.y * SCREEN_HEIGHT

    def handle_click(self, pos):
        if self.session.phase is Phase.MENU:
            self.dispatch(menu_hit(pos, self.menu_rects))
        elif self.session.phase is Phase.PLAYING:
            self.dispatch(dpad_hit(pos, self.dpad_rects))

    def handle_finger_down(self, pos):
        self.touch_start = pos
        in_playfield = HUD_HEIGHT <= pos[1] < HUD_HEIGHT + PLAYFIELD_HEIGHT
        if in_playfield and self.double_tap.tap(pygame.time.get_ticks()):
            self.dispatch(Action.PAUSE)

    def handle_finger_up(self, pos):
        start, self.touch_start = self.touch_start, None
        if start is None:
            return
        self.dispatch(swipe_direction(start, pos))

    def update(self):
        self.effects.update()

    def draw(self):
        view = self.session.snapshot()
        if view.phase is Phase.MENU:
            self.draw_start_menu(view)
        else:
            self.draw_playfield(view)
            if view.phase is Phase.PAUSED:
                self.draw_paused()
            elif view.phase is Phase.GAME_OVER:
                self.draw_game_over(view)
        pygame.display.flip()

    def draw_playfield(self, view):
        now_ms = pygame.time.get_ticks()
        self.screen.fill(COLOR_BG)
        self.screen.blit(self.background, (0, HUD_HEIGHT))

        self.food_renderer.draw_food(self.screen, view.food, now_ms, HUD_HEIGHT)
        if view.powerup:
            self.food_renderer.draw_powerup(self.screen, view.powerup, now_ms, HUD_HEIGHT)
        self.snake_renderer.draw(self.screen, view.snake, view.direction, HUD_HEIGHT)
        self.effects.draw(self.screen, HUD_HEIGHT)

        self.draw_hud(view)
        self.draw_dpad()

    def draw_hud(self, view):
        pygame.draw.rect(self.screen, (0, 0, 0), (0, 0, SCREEN_WIDTH, HUD_HEIGHT))
        padding = 12
        score_text = self.font.render(f"Score: {view.score}", True, COLOR_HUD)
        high_text = self.font.render(f"High Score: {view.high_score}", True, COLOR_HUD)
        level_text = self.small_font.render(
            f"Difficulty: {view.difficulty.label}", True, COLOR_DIFFICULTY[view.difficulty.value]
        )
        self.screen.blit(score_text, score_text.get_rect(midleft=(padding, HUD_HEIGHT // 2)))
        self.screen.blit(level_text, level_text.get_rect(center=(SCREEN_WIDTH // 2, HUD_HEIGHT // 2)))
        self.screen.blit(high_text, high_text.get_rect(midright=(SCREEN_WIDTH - padding, HUD_HEIGHT // 2)))

    def draw_dpad(self):
        top = HUD_HEIGHT + PLAYFIELD_HEIGHT
        pygame.draw.rect(self.screen, (0, 0, 0), (0, top, SCREEN_WIDTH, DPAD_HEIGHT))
        for direction, rect in self.dpad_rects.items():
            pygame.draw.rect(self.screen, COLOR_MUTED, rect, border_radius=6)
            label = self.font.render(DPAD_ARROWS[direction], True, COLOR_HUD)
            self.screen.blit(label, label.get_rect(center=rect.center))

    def draw_center_text(self, text: str, font: pygame.font.Font, color, y_offset: int = 0):
        surface = font.render(text, True, color)
        self.screen.blit(surface, surface.get_rect(center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2 + y_offset)))

    def draw_paused(self):
        self.draw_center_text("Paused", self.title_font, COLOR_STAR)
        self.draw_center_text("Press 'P' to Resume", self.font, COLOR_HUD, 50)

    def draw_game_over(self, view):
        overlay = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 204))
        self.screen.blit(overlay, (0, 0))

        self.draw_center_text("Game Over!", self.title_font, COLOR_FOOD)
        self.draw_center_text(f"Score: {view.score}", self.big_font, COLOR_HUD, 50)
        if view.new_best:
            self.draw_center_text("New High Score!", self.font, COLOR_STAR, 90)
        self.draw_center_text("Press Enter to Restart", self.font, COLOR_HUD, 130)
        self.draw_center_text("Press M for Menu", self.font, COLOR_BUTTON, 160)

    def draw_start_menu(self, view):
        self.screen.fill(COLOR_BG)
        self.draw_center_text("SNAKE GAME", self.title_font, COLOR_SNAKE_HEAD, -100)

        for difficulty in Difficulty:
            rect = self.menu_rects[difficulty]
            selected = difficulty is view.difficulty
            color = COLOR_DIFFICULTY[difficulty.value] if selected else COLOR_MUTED
            pygame.draw.rect(self.screen, color, rect)
            label = self.font.render(difficulty.label, True, (255, 255, 255))
            self.screen.blit(label, label.get_rect(center=rect.center))

        start_rect = self.menu_rects[Action.START]
        pygame.draw.rect(self.screen, COLOR_BUTTON, start_rect)
        label = self.font.render("Start Game", True, (255, 255, 255))
        self.screen.blit(label, label.get_rect(center=start_rect.center))

        hints_y = start_rect.bottom + 40
        for i, hint in enumerate(("Arrow Keys or WASD to move", "P to pause, M for menu")):
            text = self.small_font.render(hint, True, COLOR_HINT)
            self.screen.blit(text, text.get_rect(center=(SCREEN_WIDTH // 2, hints_y + i * 25)))

        high_text = self.small_font.render(f"High Score: {view.high_score}", True, COLOR_HUD)
        self.screen.blit(high_text, high_text.get_rect(midbottom=(SCREEN_WIDTH // 2, SCREEN_HEIGHT - 18)))

    def run(self):
        while self.running:
            self.clock.tick(FPS)
            self.handle_events()
            self.update()
            self.draw()

        self.timer.stop()
        pygame.quit()
