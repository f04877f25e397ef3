import pygame
from blockfall_session import State

INTRO_LINES = [
    "press Space or Enter to start",
    "",
    "Left / Right   move",
    "Down           faster descent",
    "Up / Space     rotate while entering",
    "Enter / Esc    pause / resume",
]

class Overlay:
    """Intro, paused and game-over screens drawn over the board."""
    def __init__(self, font, big_font):
        self.font=font
        self.big_font=big_font
        self._cache={}

    def _text(self,text,big=False,col=(200,210,235)):
        key=(text,big,col)
        if key not in self._cache:
            self._cache[key]=(self.big_font if big else self.font).render(text,True,col)
        return self._cache[key]

    def _panel(self,screen,rect,title,lines):
        s=pygame.Surface(rect.size,pygame.SRCALPHA); s.fill((20,25,40,230))
        screen.blit(s,rect.topleft)
        t=self._text(title,True,(230,240,255))
        screen.blit(t,t.get_rect(midtop=(rect.centerx,rect.y+24)))
        y=rect.y+80
        for line in lines:
            if line:
                screen.blit(self._text(line),(rect.x+20,y))
            y+=26

    def draw(self,screen,state,running,dims):
        rect=pygame.Rect(dims.board_x,dims.board_y,dims.board_w,dims.board_h).inflate(-24,-dims.board_h//3)
        if state==State.INTRO:
            self._panel(screen,rect,"BLOCKFALL",INTRO_LINES)
        elif state==State.GAME_OVER:
            self._panel(screen,rect,"GAME OVER",["press Space or Enter to restart"])
        elif not running:
            self._panel(screen,rect,"PAUSED",["press Enter or Esc to resume"])
