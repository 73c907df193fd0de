"""
Atbash GUI - tkinter shell around atbash_engine.transform

- Type or open text in the top box, click Transform.
- The bottom box shows the result; transforming it again decrypts.
- Buttons: Copy, Clear, Transform. File menu: Open..., Save As...
- Theme (light/dark) and language (Korean/English) menus.

No external deps (stdlib tkinter only).
"""
import sys
import argparse
import tkinter as tk
from enum import Enum
from dataclasses import dataclass
from tkinter import ttk, filedialog, messagebox

import atbash_engine
from atbash_engine import transform, load_text, save_text, log_info, log_warn

WINDOW_SIZE = (600, 500)
MIN_WINDOW_SIZE = (450, 350)
FEEDBACK_DELAY_MS = 2000
BASE_FONT = ("TkDefaultFont", 12)
FEEDBACK_FONT = ("TkDefaultFont", 11, "bold")
FILE_TYPES = [("Text Files (*.txt)", "*.txt"), ("All Files", "*.*")]

# ===== Themes =====
@dataclass(frozen=True)
class Palette:
    background: str
    text_area: str
    output_area: str
    foreground: str
    primary_button: str
    secondary_button: str
    border: str


class Theme(Enum):
    LIGHT = Palette("#f5f7f9", "#ffffff", "#ebedef", "#323232", "#007bff", "#6c757d", "#dcdfe2")
    DARK = Palette("#2b2b2b", "#3c3f41", "#323436", "#dcdcdc", "#0275d8", "#5a6268", "#505050")

# ===== UI strings =====
class Language(Enum):
    KOREAN = "ko"
    ENGLISH = "en"


class UIText(Enum):
    """Display strings as (Korean, English) pairs."""
    WINDOW_TITLE = ("아트배쉬 암호화/복호화 툴 V2", "Atbash Encryption/Decryption Tool V2")
    FILE_MENU = ("파일", "File")
    SAVE_MENU = ("저장...", "Save As...")
    LOAD_MENU = ("불러오기...", "Open...")
    THEME_MENU = ("테마", "Theme")
    LIGHT_MODE_MENU = ("라이트 모드", "Light Mode")
    DARK_MODE_MENU = ("다크 모드", "Dark Mode")
    LANGUAGE_MENU = ("언어", "Language")
    KOREAN_MENU = ("한국어", "한국어")
    ENGLISH_MENU = ("English", "English")
    INPUT_LABEL = ("원본 텍스트", "Input Text")
    OUTPUT_LABEL = ("변환된 텍스트", "Output Text")
    TRANSFORM_BUTTON = ("변환", "Transform")
    CLEAR_BUTTON = ("초기화", "Clear")
    COPY_BUTTON = ("복사", "Copy")
    COPY_FEEDBACK = ("복사됨", "Copied")

    def get(self, lang: Language) -> str:
        korean, english = self.value
        return korean if lang is Language.KOREAN else english

# ===== GUI =====
class AtbashGUI(tk.Tk):
    def __init__(self, theme: Theme = Theme.LIGHT, language: Language = Language.KOREAN):
        super().__init__()
        self.geometry("{}x{}".format(*WINDOW_SIZE))
        self.minsize(*MIN_WINDOW_SIZE)

        self.style = ttk.Style(self)
        self.theme_var = tk.StringVar(value=theme.name)
        self.language_var = tk.StringVar(value=language.name)
        self.current_theme = theme
        self.current_language = language
        self._feedback_job = None

        self._build_widgets()
        self._build_menu()
        self.set_theme(theme)
        self.set_language(language)

    def _build_widgets(self):
        self.main = ttk.Frame(self, padding=15, style="Main.TFrame")
        self.main.pack(fill="both", expand=True)

        # Input
        self.lbl_in = ttk.Label(self.main, style="Main.TLabel")
        self.lbl_in.pack(anchor="w", padx=(5, 0), pady=(0, 5))
        self.txt_in = tk.Text(self.main, height=8, wrap="word", font=BASE_FONT,
                              padx=8, pady=8, relief="flat", highlightthickness=1)
        self.txt_in.pack(fill="both", expand=True, pady=(0, 10))

        # Output (read-only)
        self.lbl_out = ttk.Label(self.main, style="Main.TLabel")
        self.lbl_out.pack(anchor="w", padx=(5, 0), pady=(0, 5))
        self.txt_out = tk.Text(self.main, height=8, wrap="word", font=BASE_FONT,
                               padx=8, pady=8, relief="flat", highlightthickness=1,
                               state="disabled")
        self.txt_out.pack(fill="both", expand=True, pady=(0, 15))

        # Feedback + buttons
        frm_bottom = ttk.Frame(self.main, style="Main.TFrame")
        frm_bottom.pack(fill="x")
        self.lbl_feedback = ttk.Label(frm_bottom, font=FEEDBACK_FONT, style="Main.TLabel")
        self.lbl_feedback.pack(side="left", padx=(5, 0))
        self.btn_transform = ttk.Button(frm_bottom, command=self.on_transform, style="Primary.TButton")
        self.btn_transform.pack(side="right", padx=(10, 0))
        self.btn_clear = ttk.Button(frm_bottom, command=self.on_clear, style="Secondary.TButton")
        self.btn_clear.pack(side="right", padx=(10, 0))
        self.btn_copy = ttk.Button(frm_bottom, command=self.on_copy, style="Secondary.TButton")
        self.btn_copy.pack(side="right", padx=(10, 0))

    def _build_menu(self):
        self.menubar = tk.Menu(self, tearoff=False)

        self.file_menu = tk.Menu(self.menubar, tearoff=False)
        self.file_menu.add_command(command=self.on_load)
        self.file_menu.add_command(command=self.on_save)

        self.theme_menu = tk.Menu(self.menubar, tearoff=False)
        for theme in Theme:
            self.theme_menu.add_radiobutton(variable=self.theme_var, value=theme.name,
                                            command=lambda t=theme: self.set_theme(t))

        self.language_menu = tk.Menu(self.menubar, tearoff=False)
        for lang in Language:
            self.language_menu.add_radiobutton(variable=self.language_var, value=lang.name,
                                               command=lambda lg=lang: self.set_language(lg))

        self.menubar.add_cascade(menu=self.file_menu)
        self.menubar.add_cascade(menu=self.theme_menu)
        self.menubar.add_cascade(menu=self.language_menu)
        self.config(menu=self.menubar)

    # --- text helpers ---
    def get_input(self) -> str:
        return self.txt_in.get("1.0", "end-1c")

    def get_output(self) -> str:
        return self.txt_out.get("1.0", "end-1c")

    def set_input(self, text: str):
        self.txt_in.delete("1.0", "end")
        self.txt_in.insert("1.0", text)

    def set_output(self, text: str):
        self.txt_out.config(state="normal")
        self.txt_out.delete("1.0", "end")
        self.txt_out.insert("1.0", text)
        self.txt_out.config(state="disabled")

    # --- actions ---
    def on_transform(self):
        self.set_output(transform(self.get_input()))

    def on_clear(self):
        self.set_input("")
        self.set_output("")

    def on_copy(self):
        text = self.get_output()
        if not text:
            return
        self.clipboard_clear()
        self.clipboard_append(text)
        self.show_feedback(UIText.COPY_FEEDBACK.get(self.current_language))

    def show_feedback(self, message: str):
        # A new message restarts the hide delay
        if self._feedback_job is not None:
            self.after_cancel(self._feedback_job)
        self.lbl_feedback.config(text=message)
        self._feedback_job = self.after(FEEDBACK_DELAY_MS, self.clear_feedback)

    def clear_feedback(self):
        if self._feedback_job is not None:
            self.after_cancel(self._feedback_job)
            self._feedback_job = None
        self.lbl_feedback.config(text="")

    def on_save(self):
        path = filedialog.asksaveasfilename(parent=self, filetypes=FILE_TYPES,
                                            title=UIText.SAVE_MENU.get(self.current_language))
        if not path:
            return
        self.save_to(path)

    def save_to(self, path):
        try:
            return save_text(path, self.get_output())
        except (OSError, UnicodeError) as e:
            log_warn(f"Save failed: {e}")
            messagebox.showerror("Save Error", f"Error saving file: {e}", parent=self)
            return None

    def on_load(self):
        path = filedialog.askopenfilename(parent=self, filetypes=FILE_TYPES,
                                          title=UIText.LOAD_MENU.get(self.current_language))
        if not path:
            return
        self.load_from(path)

    def load_from(self, path) -> bool:
        try:
            content = load_text(path)
        except (OSError, UnicodeDecodeError) as e:
            log_warn(f"Load failed: {e}")
            messagebox.showerror("Load Error", f"Error loading file: {e}", parent=self)
            return False
        self.set_input(content)
        # New input invalidates the previous result
        self.set_output("")
        return True

    # --- theme & language ---
    def set_theme(self, theme: Theme):
        self.current_theme = theme
        self.theme_var.set(theme.name)
        p = theme.value

        self.configure(background=p.background)
        self.style.configure("Main.TFrame", background=p.background)
        self.style.configure("Main.TLabel", background=p.background, foreground=p.foreground)
        for name, color in (("Primary.TButton", p.primary_button), ("Secondary.TButton", p.secondary_button)):
            self.style.configure(name, background=color, foreground="#ffffff", padding=(20, 8))
            self.style.map(name, background=[("active", color)])
        for box, bg in ((self.txt_in, p.text_area), (self.txt_out, p.output_area)):
            box.config(background=bg, foreground=p.foreground, insertbackground=p.foreground,
                       highlightbackground=p.border, highlightcolor=p.border)
        log_info(f"Theme set to {theme.name.lower()}")

    def set_language(self, lang: Language):
        self.current_language = lang
        self.language_var.set(lang.name)

        self.title(UIText.WINDOW_TITLE.get(lang))
        self.menubar.entryconfig(0, label=UIText.FILE_MENU.get(lang))
        self.menubar.entryconfig(1, label=UIText.THEME_MENU.get(lang))
        self.menubar.entryconfig(2, label=UIText.LANGUAGE_MENU.get(lang))
        self.file_menu.entryconfig(0, label=UIText.LOAD_MENU.get(lang))
        self.file_menu.entryconfig(1, label=UIText.SAVE_MENU.get(lang))
        self.theme_menu.entryconfig(0, label=UIText.LIGHT_MODE_MENU.get(lang))
        self.theme_menu.entryconfig(1, label=UIText.DARK_MODE_MENU.get(lang))
        self.language_menu.entryconfig(0, label=UIText.KOREAN_MENU.get(lang))
        self.language_menu.entryconfig(1, label=UIText.ENGLISH_MENU.get(lang))
        self.lbl_in.config(text=UIText.INPUT_LABEL.get(lang))
        self.lbl_out.config(text=UIText.OUTPUT_LABEL.get(lang))
        self.btn_transform.config(text=UIText.TRANSFORM_BUTTON.get(lang))
        self.btn_clear.config(text=UIText.CLEAR_BUTTON.get(lang))
        self.btn_copy.config(text=UIText.COPY_BUTTON.get(lang))
        # Feedback would otherwise linger in the old language
        self.clear_feedback()


def main(argv=None):
    parser = argparse.ArgumentParser(prog="atbash-gui", description="Atbash cipher desktop tool")
    parser.add_argument("--theme", choices=["light", "dark"], default="light")
    parser.add_argument("--lang", choices=[lg.value for lg in Language], default=Language.KOREAN.value)
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose output (info and warning messages)")
    args = parser.parse_args(argv)

    atbash_engine.VERBOSE = args.verbose
    app = AtbashGUI(theme=Theme[args.theme.upper()], language=Language(args.lang))
    app.mainloop()
    return 0

if __name__ == "__main__":
    sys.exit(main())
