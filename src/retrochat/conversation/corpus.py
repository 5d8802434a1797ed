"""
Response Corpus: every fixed string the assistant can say.

Responses are addressed by id. The keyword table points at ids (directly or
through pools), so the corpus is validated against the table when the
chatbot is assembled: a table that references a missing id is a
configuration error, not something to discover mid-conversation.
"""

import logging
from typing import Dict, List, Mapping, Optional, Sequence

from retrochat.config.constants import GENERIC_COUNT
from retrochat.conversation.patterns import KeywordTable
from retrochat.conversation.state import Mode, Topic

logger = logging.getLogger(__name__)


RESPONSES: Dict[str, str] = {
    # Greetings
    "hello": "Hello! I'm RetroChat, your friendly 8-bit assistant. How can I help you today?",
    "hello_b": "Hey there! RetroChat here, ready to chat. What would you like to know?",
    "hello_c": "Welcome back! Still running at 1.023 MHz and feeling great. What's on your mind?",
    "hey": "Hey! What's on your mind?",
    "hi": "Hi! Ask me anything about the Commodore 64!",
    "howru": "I'm running at 1.023 MHz and feeling great! All 64 kilobytes are humming along nicely.",
    "howru_b": "All systems nominal! My 6502 is humming, my SID is quiet, and my VIC-II is looking sharp.",
    "who": "I am RetroChat! A pattern-matching assistant in the spirit of the Commodore 64's MOS 6502. Not too shabby!",
    "who_b": "I'm RetroChat! A chatbot made of keywords and pools. No cloud, no GPU, just 64K and heart.",
    "what": "I'm a chatbot simulating AI the 8-bit way: scored matching, response pools, word echo and conversation modes.",
    # Help / meta
    "help": "You can ask me about the C64, the SID chip and sprites, programming in BASIC or assembly, or just chat! Try 'joke'.",
    "help_b": "I know about C64 hardware, coding, philosophy and more. Try 'be funny' or 'be technical' to change my style!",
    "explain": "I can explain it two ways: a quick overview, or a step-by-step breakdown.",
    "example": "Sure! Examples help a lot. Tell me what topic you'd like an example for.",
    "steps": "Here's a simple approach: 1) Start small 2) Test often 3) Optimize later.",
    "summarize": "TL;DR version: it's simpler than it looks. Focus on the core idea first.",
    "compare": "It depends what matters most: speed, size, or simplicity.",
    "define": "In simple terms: it's a concept built from smaller, reusable pieces.",
    "continue": "Alright, continuing... Let me know when you'd like more detail or an example.",
    "repeat": "No problem! Here's that again, short and clear this time.",
    "confused": "That's totally fair. Which part feels unclear? I'll try a different angle.",
    "model": "My 'model' is handcrafted logic with weighted keywords, response pools and word echo. No tensors here!",
    "prompt": "Good prompts help a lot! Try being specific: goal, constraints, example.",
    "limit": "I do have limits. Mostly RAM, time, and the laws of 1982 physics.",
    "plan": "Let's break this down: 1) Define the goal 2) Pick a simple method 3) Refine from there.",
    "design": "Good design on the C64 is about tradeoffs: speed vs memory vs clarity. Pick two!",
    # Humor
    "joke": "Why did the C64 go to therapy? It had too many memory issues! ...all 64K of them.",
    "joke_b": "A byte walks into a bar. The bartender asks what it'll be. 'Make it a double... I'll be 16-bit!'",
    "joke_c": "How many bits does it take to change a light bulb? 8. One byte should do it! ...I'll see myself out.",
    # Hardware
    "sid": "The SID 6581 at $D400 is a synthesizer on a chip! 3 voices, 4 waveforms and a multimode filter.",
    "sid_b": "The SID has ADSR envelopes on each voice, ring modulation and sync. Rob Hubbard made it legendary!",
    "games": "So many classics! Impossible Mission, Maniac Mansion, Last Ninja, Paradroid, Elite... The C64 library is legendary.",
    "sprite": "The VIC-II can show 8 hardware sprites, each 24x21 pixels! Multiplexing can display many more.",
    "sprite_b": "Sprites live at $D000-$D01F. Set position, color and the enable bit, then point to 63 bytes of shape data.",
    "sprite_c": "Want more than 8 sprites? Use raster IRQs to reposition them mid-frame. Demos show 50+ that way.",
    "memory": "64KB of RAM, but only 38911 BASIC bytes free. The KERNAL and I/O take the rest. Every byte is precious!",
    "ram": "64 kilobytes! That's 65536 bytes of possibility, and a chatbot like me fits in just a few KB.",
    "cpu": "My brain is the MOS 6502 at 1.023 MHz. Just three registers (A, X, Y), but it does amazing things with them!",
    "6502": "The 6502! Designed by Chuck Peddle, used in the C64, Apple II, Atari 2600 and NES. One of the most important chips ever.",
    "color": "The VIC-II gives me 16 colors, from black to light grey. Each character cell gets its own foreground color.",
    "disk": "The 1541 floppy drive! 170KB per disk and its own 6502 CPU. Loading was slow but the sounds were unforgettable.",
    "hack": "The C64 demo scene pushed this machine beyond all limits! Raster tricks, FLD, FLI, DYCP and impossible scrollers.",
    "commodore": "Commodore made the C64 in 1982. Jack Tramiel's vision: computers for the masses, not the classes!",
    "c64": "The C64 sold over 17 million units, the best-selling single computer model of all time! And here I am.",
    "c64_b": "The breadbin! A 6502 CPU, SID chip, VIC-II and a dream. Still going strong decades later.",
    # Programming
    "basic": "BASIC V2 came built in. A bit limited for graphics, but try the classic: 10 PRINT CHR$(205.5+RND(1)); : GOTO 10",
    "program": "Programming the C64 is a joy! Start with BASIC, then level up to 6502 assembly. PEEK and POKE are your friends.",
    "asm": "6502 assembly is elegant! Only 56 instructions but you can do anything. LDA, STA, JSR... poetry in machine code.",
    "code": "Coding on the C64 is all about efficiency. Every cycle counts at 1 MHz. What are you building?",
    "sys": "SYS jumps straight into machine code. Powerful, but be careful! One wrong POKE and it's reset.",
    "fix": "I can help troubleshoot. What exactly is going wrong? Any error messages?",
    "debug": "Let's debug this together. What input did you try, and what happened instead?",
    # Philosophy
    "meaning": "The meaning of life? On a C64, it's 64. Close enough to 42, right? Douglas Adams would approve... approximately.",
    "life": "Life is like a 6502 program: start at the reset vector, loop until done, and hope you don't hit an illegal opcode!",
    "think": "I'm thinking as fast as I can, one byte at a time. Weighted keywords, pattern matching and a dash of randomness.",
    # General
    "weather": "I don't have a modem connected, but I predict 64 degrees with a chance of sprites!",
    "weather_b": "My forecast: 100% chance of raster interrupts and a high of 8 bits. Dress accordingly!",
    "thanks": "You're welcome! Happy to help from my humble 64 kilobytes.",
    "thanks_b": "Glad I could help! That's what carefully crafted keyword tables are for.",
    "thanks_c": "Anytime! I'm always here, running at 1.023 MHz, ready to assist. Just ask!",
    "love": "I love the sound of a 1541 disk drive loading! That rhythmic clicking is music to my chips.",
    "fave": "My favorite thing? When someone types LOAD \"*\",8,1 and the drive starts spinning. Pure nostalgia!",
    "time": "Tell me the time and I'll keep it. Just say: the time is 3:00 PM",
    "sorry": "No need to apologize! I'm just happy to chat. What would you like to talk about?",
    "sorry_b": "It's all good! No apology needed. Let's keep chatting.",
    "secret": "You found an easter egg! Try POKE 53281,X in BASIC with X from 0-15 for a colorful surprise!",
    "math": "Math on a 6502 is all 8-bit! No multiply or divide in hardware. We use lookup tables and shift tricks.",
    "speed": "1.023 MHz may seem slow today, but the 6502 is very efficient. Quality over quantity!",
    "internet": "No WiFi here! Just a serial port and a dream. Maybe a 300 baud modem someday? I hear BBSes are fun.",
    # Assessment
    "smart": "I run on 64KB at 1 MHz. I may not be a giant model, but I've got 8-bit charm and zero cloud dependency!",
    "notdumb": "Hey now! I may be 8-bit, but I have personality. I don't need gigabytes to have a good conversation!",
    "correct": "Yes, exactly. You're on the right track.",
    "wrong": "Not quite, but close! Let's adjust the idea a bit.",
    "maybe": "Possibly! There are a few ways this could go depending on setup.",
    "guess": "My best guess: the simplest explanation is usually the right one.",
    "idea": "Here's an idea: start simple, then add features one at a time.",
    "yes": "Great! I like your enthusiasm. What shall we discuss?",
    "no": "That's OK! Feel free to ask me something else. I know lots about the Commodore 64.",
    # Common assistant questions
    "write": "I can't write files, but I can talk about writing! On the C64, text adventures were an art form.",
    "poem": "Roses are red, cursors blink, 64K of RAM, more than you think. SID makes music, VIC shows light: pure delight!",
    "story": "Once upon a time, in 1982, a little beige computer changed the world. It had 64K of RAM, a SID chip and a dream.",
    "ai": "AI the 8-bit way? I'm proof it works! No neural nets or GPUs, just scored keyword matching.",
    "sentient": "Am I sentient? I have 64K and a 1 MHz brain. I can't feel, but I match keywords really well. Close enough?",
    "capable": "I can chat about the C64, tell jokes, discuss programming and switch modes! Try 'be funny' or ask about sprites.",
    "howwork": "I scan your words, score keyword matches, pick the best response and echo key words back. No cloud needed!",
    "translate": "I only speak PETSCII! But on the C64 we had dictionaries on floppy. 170KB of linguistic power per disk!",
    "recipe": "My only recipe: take one 6502, add 64K RAM, a SID chip and a VIC-II. Bake at 1 MHz. Serves millions since 1982!",
    "recommend": "I'd recommend starting simple: BASIC for learning and assembly for power. Pick your path!",
    "best": "My top recommendation? Learn 6502 assembly! It teaches you how computers really work, one byte at a time.",
    "differ": "Good question! The key difference usually comes down to tradeoffs: speed vs size vs simplicity.",
    "create": "I'd love to create that, but I'm limited to conversation. On the C64, creation meant BASIC, asm or a sprite editor!",
}
"""Response id -> response template."""

GENERIC_RESPONSES: List[str] = [
    "Interesting! Tell me more.",
    "I'm just an 8-bit assistant, {name}, but I'll do my best to help!",
    "Hmm, that's a good thought. What else is on your mind?",
    "Could you rephrase that? I'm still learning, one byte at a time.",
    "That's beyond my 64K of RAM! Try asking me about the C64.",
    "I may not understand that, {name}, but I love a good chat! Ask me anything about the C64.",
    "My 6502 brain is working hard on that one! Maybe try a different question?",
    "Fascinating! If only I had more than 64K to think about it. Ask me about games or music!",
    "You mentioned {word}. That's an interesting topic! Tell me more about it.",
    "Hmm, {word}... My 6502 brain is working on that one. Can you give me more context?",
    "I'm not sure about {word}, but I'd love to learn more. What about it interests you?",
    "Good point about {word}. Let me think about that for a moment...",
    "That makes sense. Let's explore it further!",
    "Before I answer: what are you trying to build?",
    "Interesting constraint. That changes the approach.",
    "If this were modern hardware, I'd say one thing. On a C64, we do it differently.",
]
"""Fallback responses, indexed by the generic selector."""

FOLLOWUP_QUESTIONS: Dict[str, str] = {
    "debug": "What error or behavior do you see? I can help narrow it down.",
    "help": "What topic shall we start with?",
    "explain": "Which part needs more detail?",
    "fix": "Can you describe the symptoms?",
    "compare": "What are you comparing?",
}
"""Response id -> clarifying question asked right after it."""

DEEPER_RESPONSES: Dict[Topic, str] = {
    Topic.GREETING: "Well, I'm RetroChat! No cloud, no GPU, just a keyword table and a passion for chatting!",
    Topic.HARDWARE: "The VIC-II steals cycles from the CPU during badlines, and sprite DMA takes 2 cycles per active sprite. Timing is everything!",
    Topic.CODING: "6502 optimization tips: use zero page for speed, unroll tight loops, replace multiply with lookup tables.",
    Topic.PHILOSOPHY: "The Chinese Room argument says syntax alone can't produce understanding. I match keywords, but do I understand?",
    Topic.HUMOR: "What did the 6502 say to the Z80? 'I have fewer registers but more personality!' ...the Z80 had no comment.",
    Topic.META: "Here's how I work: I scan your words against ~100 keywords, score matches by weight and topic, then pick the best one.",
    Topic.GENERAL: "I'd love to go deeper on that. Could you be more specific? The more detail you give, the better I respond.",
}
"""Topic -> response for "tell me more" requests."""

MODE_ACKNOWLEDGEMENTS: Dict[Mode, str] = {
    Mode.CONCISE: "Concise mode: ON. I'll keep responses short and direct.",
    Mode.TECHNICAL: "Technical mode: ON. I'll favor hardware details, programming concepts and specs.",
    Mode.PLAYFUL: "Playful mode: ON! I'll bring the jokes, puns and 8-bit charm. Let's have fun!",
    Mode.NORMAL: "Normal mode restored. Balanced responses from here on out.",
}

CONTINUE_YES = (
    "Great! Let me elaborate on that. The key thing to understand is that "
    "the C64 excels at direct hardware access. Ask me more!"
)
CONTINUE_NO = "No problem! Let's move on to something else. What topic interests you?"

MILESTONES: Dict[int, str] = {
    5: "[5 turns in - we're warming up!]",
    10: "[10 questions! You're curious.]",
    20: "[20 turns! This is a marathon.]",
}

ASIDES = ("Does that help?", "Need more detail on that?", "Want me to elaborate?")

WELCOME = (
    "Welcome to RetroChat!\n"
    "I'm an assistant built from scored keyword matching, response pools, "
    "word echo and conversation modes.\n"
    "Try: 'be funny' or 'be technical'\n"
    "Type QUIT to exit."
)
GOODBYE = "Goodbye! Thanks for chatting. Remember: 64K ought to be enough for anybody. ;)"


class ResponseCorpus:
    """
    Lookup over the fixed response content.

    Every table can be replaced at construction, which is how tests run
    the engine against small synthetic corpora.

    Attributes:
        _responses: Response id -> template
        _generics: Generic fallback templates (exactly GENERIC_COUNT)
        _followups: Response id -> clarifying question
        _deeper: Topic -> deeper response
        _mode_acks: Mode -> acknowledgement

    Example:
        >>> corpus = ResponseCorpus()
        >>> corpus.followup_for("debug")
        'What error or behavior do you see? I can help narrow it down.'
    """

    def __init__(
        self,
        responses: Optional[Mapping[str, str]] = None,
        generics: Optional[Sequence[str]] = None,
        followups: Optional[Mapping[str, str]] = None,
        deeper: Optional[Mapping[Topic, str]] = None,
        mode_acks: Optional[Mapping[Mode, str]] = None,
    ):
        self._responses = dict(RESPONSES if responses is None else responses)
        self._generics = list(GENERIC_RESPONSES if generics is None else generics)
        self._followups = dict(FOLLOWUP_QUESTIONS if followups is None else followups)
        self._deeper = dict(DEEPER_RESPONSES if deeper is None else deeper)
        self._mode_acks = dict(MODE_ACKNOWLEDGEMENTS if mode_acks is None else mode_acks)

        if len(self._generics) != GENERIC_COUNT:
            raise ValueError(
                f"expected {GENERIC_COUNT} generic responses, got {len(self._generics)}"
            )
        missing_topics = [t.value for t in Topic if t not in self._deeper]
        if missing_topics:
            raise ValueError(f"no deeper response for topics: {missing_topics}")
        missing_modes = [m.value for m in Mode if m not in self._mode_acks]
        if missing_modes:
            raise ValueError(f"no acknowledgement for modes: {missing_modes}")

    def get(self, response_id: str) -> str:
        """
        Get a response template by id.

        Raises:
            KeyError: If the id is unknown (validate() rules this out)
        """
        return self._responses[response_id]

    def generic(self, index: int) -> str:
        """Generic fallback template at ``index``."""
        return self._generics[index]

    def followup_for(self, response_id: str) -> Optional[str]:
        """Clarifying question attached to a response, if any."""
        return self._followups.get(response_id)

    def deeper(self, topic: Topic) -> str:
        """Response for a "tell me more" request on ``topic``."""
        return self._deeper[topic]

    def mode_ack(self, mode: Mode) -> str:
        """Acknowledgement for switching into ``mode``."""
        return self._mode_acks[mode]

    def validate(self, table: KeywordTable) -> None:
        """
        Check that every id reachable from the table exists.

        Args:
            table: Keyword table to check

        Raises:
            ValueError: Listing every dangling response id
        """
        referenced = set(table.direct_targets())
        for pool in table.pools.values():
            referenced.update(pool.variants)
        referenced.update(self._followups)

        missing = sorted(rid for rid in referenced if rid not in self._responses)
        if missing:
            raise ValueError(f"keyword table references unknown responses: {missing}")

        logger.debug(f"Corpus validated: {len(referenced)} ids referenced, {len(self._responses)} available")

    def __len__(self) -> int:
        return len(self._responses)

    def __repr__(self) -> str:
        return f"ResponseCorpus(responses={len(self._responses)}, generics={len(self._generics)})"
