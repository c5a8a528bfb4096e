"""
Preview window using pygame.

Paints the demo pages through the transition orchestrator so every
transition variant can be watched and debugged on the desktop.
"""

import pygame
import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from ..config.settings import SimulatorSettings
from ..core.events import EventBus, EventType, Event, route_changed_event, shutdown_event
from ..demo import DemoRoute, NAV_ORDER, PAGES, PageInfo
from ..transitions.orchestrator import Frame, LayerState, TransitionFrame, TransitionOrchestrator
from .layout import Rect, layer_rect, opacity_to_alpha

logger = logging.getLogger(__name__)


@dataclass
class WindowConfig:
    """Preview window configuration."""
    width: int = 960
    height: int = 600
    title: str = "Animated Router"
    fullscreen: bool = False
    fps: int = 60

    nav_height: int = 48

    # Colors
    bg_color: tuple[int, int, int] = (20, 20, 30)
    nav_color: tuple[int, int, int] = (245, 245, 250)
    nav_active_color: tuple[int, int, int] = (224, 231, 255)
    nav_text_color: tuple[int, int, int] = (75, 85, 99)
    nav_active_text_color: tuple[int, int, int] = (67, 56, 202)
    text_color: tuple[int, int, int] = (200, 200, 220)

    @classmethod
    def from_settings(cls, settings: SimulatorSettings) -> "WindowConfig":
        return cls(
            width=settings.width,
            height=settings.height,
            title=settings.title,
            fullscreen=settings.fullscreen,
            fps=settings.fps,
        )


class SimulatorWindow:
    """
    Preview window driving one TransitionOrchestrator.

    Keyboard Mapping:
        1-7: Navigate (Home, Slide L, Slide R, Slide Up, Slide Down, Fade, Scale)
        0: Navigate to a missing page
        LEFT/RIGHT ARROW: Previous / next page in the navigation bar
        D: Toggle debug overlay
        L: Toggle log viewer
        ESC / Q: Exit
    """

    def __init__(
        self,
        orchestrator: TransitionOrchestrator,
        event_bus: EventBus,
        config: WindowConfig | None = None,
    ) -> None:
        self.config = config or WindowConfig()
        self.orchestrator = orchestrator
        self.event_bus = event_bus

        # Pygame setup
        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._running = False
        self._frame_count = 0
        self._show_debug = True

        # Rendered page surfaces, one per route at viewport size
        self._page_cache: dict[DemoRoute, pygame.Surface] = {}

        # Fonts
        self._font: pygame.font.Font | None = None
        self._small_font: pygame.font.Font | None = None
        self._title_font: pygame.font.Font | None = None

        # Log viewer
        self._show_log = False
        self._log_buffer: list[str] = []
        self._max_log_lines = 20
        self._log_handler: logging.Handler | None = None

        self._last_settled: Optional[Event] = None
        self.event_bus.subscribe(EventType.TRANSITION_SETTLED, self._on_settled)

        self._setup_log_capture()

        logger.info("SimulatorWindow created")

    def _setup_log_capture(self) -> None:
        """Setup log capturing for the log viewer."""
        class SimulatorLogHandler(logging.Handler):
            def __init__(self, window: 'SimulatorWindow'):
                super().__init__()
                self.window = window

            def emit(self, record):
                msg = self.format(record)
                self.window._log_buffer.append(msg)
                # Keep buffer size limited
                if len(self.window._log_buffer) > self.window._max_log_lines * 2:
                    self.window._log_buffer = self.window._log_buffer[-self.window._max_log_lines:]

        handler = SimulatorLogHandler(self)
        handler.setFormatter(logging.Formatter('%(levelname).1s %(name)s: %(message)s'))
        logging.getLogger().addHandler(handler)
        self._log_handler = handler

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)

        flags = pygame.DOUBLEBUF
        if self.config.fullscreen:
            flags |= pygame.FULLSCREEN

        self._screen = pygame.display.set_mode(
            (self.config.width, self.config.height),
            flags
        )
        self._clock = pygame.time.Clock()

        pygame.font.init()
        self._font = pygame.font.SysFont(None, 24)
        self._small_font = pygame.font.SysFont(None, 18)
        self._title_font = pygame.font.SysFont(None, 56)

        logger.info(f"Pygame initialized: {self.config.width}x{self.config.height}")

    @property
    def viewport(self) -> Rect:
        """Area below the navigation bar where routes are painted."""
        return Rect(
            0,
            self.config.nav_height,
            self.config.width,
            self.config.height - self.config.nav_height,
        )

    # Input
    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False
            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        """Handle key press."""
        key = event.key

        if key in (pygame.K_ESCAPE, pygame.K_q):
            self._running = False
        elif key == pygame.K_d:
            self._show_debug = not self._show_debug
        elif key == pygame.K_l:
            self._show_log = not self._show_log
        elif key == pygame.K_0:
            self.navigate(DemoRoute.PAGE_NOT_FOUND)
        elif pygame.K_1 <= key < pygame.K_1 + len(NAV_ORDER):
            self.navigate(NAV_ORDER[key - pygame.K_1])
        elif key == pygame.K_LEFT:
            self._step_nav(-1)
        elif key == pygame.K_RIGHT:
            self._step_nav(1)

    def _step_nav(self, step: int) -> None:
        current = self.orchestrator.state_machine.target_route()
        index = NAV_ORDER.index(current) if current in NAV_ORDER else 0
        self.navigate(NAV_ORDER[(index + step) % len(NAV_ORDER)])

    def navigate(self, route: DemoRoute) -> None:
        """Announce a route change; the orchestrator picks it up next frame."""
        logger.debug(f"Navigate: {route.value}")
        self.event_bus.queue_event(route_changed_event(route, source="simulator"))

    def _on_settled(self, event: Event) -> None:
        self._last_settled = event

    # Rendering
    def _render(self, frame: Frame) -> None:
        """Render complete frame."""
        if not self._screen:
            return

        self._screen.fill(self.config.bg_color)

        viewport = self.viewport
        self._screen.set_clip(pygame.Rect(*viewport))
        if isinstance(frame, TransitionFrame):
            self._render_layer(frame.from_layer, viewport)
            self._render_layer(frame.to_layer, viewport)
        else:
            self._render_layer(frame.layer, viewport)
        self._screen.set_clip(None)

        self._render_nav_bar()
        if self._show_debug:
            self._render_debug_panel(frame)
        if self._show_log:
            self._render_log_panel()

        pygame.display.flip()

    def _render_layer(self, layer: LayerState, viewport: Rect) -> None:
        """Blit one route layer with its transform and opacity."""
        alpha = opacity_to_alpha(layer.opacity)
        rect = layer_rect(layer.transform, viewport)
        if alpha == 0 or rect.width == 0 or rect.height == 0:
            return

        surface = self._page_surface(layer.route, viewport)
        if (rect.width, rect.height) != surface.get_size():
            surface = pygame.transform.smoothscale(surface, (rect.width, rect.height))
        if layer.transform.rotation:
            surface = pygame.transform.rotate(surface, -layer.transform.rotation)
            center = (rect.left + rect.width // 2, rect.top + rect.height // 2)
            rect = Rect(*surface.get_rect(center=center))
        else:
            surface = surface.copy()

        surface.set_alpha(alpha)
        self._screen.blit(surface, (rect.left, rect.top))

    def _page_surface(self, route: DemoRoute, viewport: Rect) -> pygame.Surface:
        """Draw (or reuse) the full-size page for a route."""
        cached = self._page_cache.get(route)
        if cached is not None and cached.get_size() == (viewport.width, viewport.height):
            return cached

        page = PAGES.get(route, PAGES[DemoRoute.PAGE_NOT_FOUND])
        surface = pygame.Surface((viewport.width, viewport.height))
        self._draw_page(surface, page)
        self._page_cache[route] = surface
        return surface

    def _draw_page(self, surface: pygame.Surface, page: PageInfo) -> None:
        """Page card with title, description and three sample cards."""
        surface.fill(page.background)
        width, height = surface.get_size()

        panel = pygame.Rect(40, 30, width - 80, height - 60)
        pygame.draw.rect(surface, (255, 255, 255), panel, border_radius=16)
        pygame.draw.rect(surface, (229, 231, 235), panel, 1, border_radius=16)

        if not (self._title_font and self._font and self._small_font):
            return

        title = self._title_font.render(page.title, True, page.accent)
        surface.blit(title, (panel.x + 32, panel.y + 28))
        description = self._font.render(page.description, True, (75, 85, 99))
        surface.blit(description, (panel.x + 32, panel.y + 28 + title.get_height() + 12))

        card_top = panel.y + 150
        gap = 16
        card_w = (panel.width - 64 - gap * 2) // 3
        card_h = max(60, panel.bottom - card_top - 32)
        for i in range(3):
            card = pygame.Rect(panel.x + 32 + i * (card_w + gap), card_top, card_w, card_h)
            pygame.draw.rect(surface, (255, 255, 255), card, border_radius=8)
            pygame.draw.rect(surface, (229, 231, 235), card, 1, border_radius=8)
            swatch = pygame.Rect(card.x + 12, card.y + 12, card.width - 24, card.height // 2)
            pygame.draw.rect(surface, page.background, swatch, border_radius=6)
            label = self._small_font.render(f"Card {i + 1}", True, (17, 24, 39))
            surface.blit(label, (card.x + 12, swatch.bottom + 10))

    def _render_nav_bar(self) -> None:
        """Navigation tabs with the target route highlighted."""
        bar = pygame.Rect(0, 0, self.config.width, self.config.nav_height)
        pygame.draw.rect(self._screen, self.config.nav_color, bar)
        pygame.draw.line(self._screen, (229, 231, 235), bar.bottomleft, bar.bottomright)

        if not self._font:
            return

        target = self.orchestrator.state_machine.target_route()
        x = 16
        for i, route in enumerate(NAV_ORDER):
            active = route == target
            text = self._font.render(
                f"{i + 1} {PAGES[route].title}",
                True,
                self.config.nav_active_text_color if active else self.config.nav_text_color,
            )
            tab = text.get_rect(midleft=(x + 12, bar.centery)).inflate(24, 12)
            if active:
                pygame.draw.rect(self._screen, self.config.nav_active_color, tab, border_radius=14)
            self._screen.blit(text, text.get_rect(center=tab.center))
            x = tab.right + 6

    def _render_debug_panel(self, frame: Frame) -> None:
        """Render debug information overlay."""
        if not self._small_font:
            return

        state = self.orchestrator.state_machine.state
        lines = [
            f"FPS: {self._clock.get_fps():.1f}" if self._clock else "FPS: -",
            f"Frame: {self._frame_count}",
            f"State: {state}",
            f"Variant: {self.orchestrator.variant or '-'}",
        ]
        if isinstance(frame, TransitionFrame):
            lines.append(f"Elapsed: {frame.elapsed_ms:.0f}ms")
            for label, layer in (("from", frame.from_layer), ("to", frame.to_layer)):
                t = layer.transform
                lines.append(
                    f"{label}: x={t.x:.1f}% y={t.y:.1f}% s={t.scale:.2f} a={layer.opacity:.2f}"
                )
        elif self._last_settled is not None:
            lines.append(f"Last settle: {self._last_settled.data.get('elapsed_ms', 0):.0f}ms")

        y = self.config.height - 12 - len(lines) * 18
        overlay = pygame.Surface((360, len(lines) * 18 + 8), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 160))
        self._screen.blit(overlay, (8, y - 4))
        for line in lines:
            text = self._small_font.render(line, True, self.config.text_color)
            self._screen.blit(text, (14, y))
            y += 18

    def _render_log_panel(self) -> None:
        """Render log viewer panel."""
        if not self._small_font:
            return

        rect = pygame.Rect(self.config.width - 470, self.config.nav_height + 10, 460, self.config.height - self.config.nav_height - 20)
        surf = pygame.Surface((rect.width, rect.height), pygame.SRCALPHA)
        surf.fill((10, 10, 20, 220))
        self._screen.blit(surf, rect.topleft)
        pygame.draw.rect(self._screen, (60, 80, 100), rect, 1, border_radius=5)

        y = rect.y + 6
        for line in self._log_buffer[-self._max_log_lines:]:
            text = self._small_font.render(line[:70], True, self.config.text_color)
            self._screen.blit(text, (rect.x + 6, y))
            y += 16

    # Main loop
    async def run(self) -> None:
        """Main preview loop."""
        self._init_pygame()
        self._running = True

        logger.info("Simulator started")

        while self._running:
            self._handle_events()

            delta_ms = float(self._clock.get_time()) if self._clock else 0.0

            # Route changes are applied before this frame's sampling
            await self.event_bus.process_queue()
            frame = self.orchestrator.tick(delta_ms)

            self._render(frame)

            if self._clock:
                self._clock.tick(self.config.fps)

            self._frame_count += 1

            # Yield to other tasks
            await asyncio.sleep(0)

        self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        if self._log_handler is not None:
            logging.getLogger().removeHandler(self._log_handler)
            self._log_handler = None
        self.event_bus.emit(shutdown_event(source="simulator"))
        pygame.quit()
        logger.info("Simulator stopped")

    def stop(self) -> None:
        """Stop the simulator."""
        self._running = False
