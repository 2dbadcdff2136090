import tkinter as tk
from tkinter import filedialog, messagebox
from src.managers.view.view_strategy import ViewStrategy
from src.models.exceptions import StateTransitionError, UnsupportedFileTypeError, InvalidInputDataError
from .sketch_canvas import SketchCanvas
from .zoom_pan import ZoomPan
from utils.logger.logger import Logger


class TkinterView(ViewStrategy):
    """Window that animates the loaded network with a ParticleViewer.

    Mouse: left press picks up the nearest node, release drops it.
    Shift + left drag pans, Shift + right drag or the wheel zooms.
    Keys: r resets the zoom, space pauses, q or Escape quits.
    """

    # GENERAL STYLE
    FONT_FAMILY = "Consolas"
    MESSAGE_FONT = (FONT_FAMILY, 15)
    MESSAGE_COLOR = "gray30"

    def __init__(self, controller):
        """Create the window, canvas, zoom/pan handler and bindings."""
        Logger.log(f"start TkinterView __init__(self, controller)")
        super().__init__(controller)
        style = controller.config.style
        self.frame_ms = style.frame_ms
        self.running = False
        self._after_id = None

        self.root = tk.Tk()
        self.root.title("NetViewer")
        self.root.geometry(f"{style.width}x{style.height}")
        self.root.protocol("WM_DELETE_WINDOW", self.stop_view)

        self.canvas = tk.Canvas(self.root, width=style.width, height=style.height,
                                bg=style.background, highlightthickness=0)
        self.canvas.pack(fill=tk.BOTH, expand=True)
        self.sketch = SketchCanvas(self.canvas, style.background)
        self.sketch.stroke_weight(style.stroke_weight)

        # Zoom/pan handlers are bound first so they capture Shift drags
        # before node selection sees the press.
        self.zoomer = ZoomPan(camera=controller.config.camera)
        self.zoomer.attach(self.canvas)
        self.canvas.bind("<ButtonPress-1>", self._on_press, add="+")
        self.canvas.bind("<ButtonRelease-1>", self._on_release, add="+")
        self.canvas.bind("<Configure>", self._on_resize, add="+")

        self.root.bind("<KeyPress-r>", lambda e: self._reset_view())
        self.root.bind("<KeyPress-space>", lambda e: self._toggle_pause())
        self.root.bind("<KeyPress-q>", lambda e: self.stop_view())
        self.root.bind("<Escape>", lambda e: self.stop_view())

        self._build_menu()
        if controller.system_state.network_loaded:
            self._attach_viewer()
        Logger.log(f"end TkinterView __init__(self, controller)")

    def _build_menu(self):
        menubar = tk.Menu(self.root)
        file_menu = tk.Menu(menubar, tearoff=0)
        file_menu.add_command(label="Open network...", command=self._open_network)
        file_menu.add_command(label="Export data...", command=lambda: self._export("excel_data_export_strategy", "none"))
        file_menu.add_command(label="Export image...", command=lambda: self._export("none", "png_image_export_strategy"))
        file_menu.add_separator()
        file_menu.add_command(label="Quit", command=self.stop_view)
        menubar.add_cascade(label="File", menu=file_menu)
        self.root.config(menu=menubar)

    def _attach_viewer(self):
        self.canvas.update_idletasks()
        width = self.canvas.winfo_width() if self.canvas.winfo_width() > 1 else None
        height = self.canvas.winfo_height() if self.canvas.winfo_height() > 1 else None
        self.controller.attach_viewer(self.sketch, self.zoomer, width, height)

    # ------------------------------ Events ------------------------------

    def _on_press(self, event):
        if self.controller.viewer is not None:
            self.controller.viewer.select_nearest_with_mouse()

    def _on_release(self, event):
        if self.controller.viewer is not None:
            self.controller.viewer.drop_selected()

    def _on_resize(self, event):
        viewer = self.controller.viewer
        if viewer is not None and event.width > 1 and event.height > 1:
            viewer.width = event.width
            viewer.height = event.height

    def _reset_view(self):
        if self.controller.viewer is not None:
            self.controller.viewer.reset_view()

    def _toggle_pause(self):
        if self.controller.viewer is not None:
            self.controller.viewer.toggle_paused()

    def _open_network(self):
        path = filedialog.askopenfilename(
            title="Open network",
            filetypes=[("Network files", "*.xlsx *.csv"), ("Excel", "*.xlsx"), ("CSV", "*.csv")],
        )
        if not path:
            return
        try:
            self.controller.input_network(path)
            self._attach_viewer()
        except (FileNotFoundError, UnsupportedFileTypeError, InvalidInputDataError) as ex:
            Logger.log(f"Failed to open network {path}: {ex}", Logger.LogPriority.ERROR)
            messagebox.showerror("Open network", str(ex))

    def _export(self, data_strategy, image_strategy):
        folder = filedialog.askdirectory(title="Export to folder")
        if not folder:
            return
        try:
            export_folder = self.controller.export(data_strategy, image_strategy, folder)
            messagebox.showinfo("Export", f"Exported to {export_folder}")
        except (StateTransitionError, ValueError, OSError) as ex:
            Logger.log(f"Export failed: {ex}", Logger.LogPriority.ERROR)
            messagebox.showerror("Export", str(ex))

    # ------------------------------ Frame loop ------------------------------

    def _frame(self):
        if not self.running:
            return
        self.sketch.clear()
        if self.controller.viewer is not None:
            self.controller.draw_frame()
        else:
            self.canvas.create_text(
                self.canvas.winfo_width() / 2, self.canvas.winfo_height() / 2,
                text="No network loaded. Use File > Open network...",
                font=self.MESSAGE_FONT, fill=self.MESSAGE_COLOR,
            )
        self._after_id = self.root.after(self.frame_ms, self._frame)

    # START VIEW
    def start_view(self):
        """Start the frame loop and block in the tk main loop."""
        Logger.log("start start_view(self)")
        self.running = True
        self._frame()
        self.root.mainloop()
        Logger.log(f"end start_view(self)")

    # STOP VIEW
    def stop_view(self):
        """Stop the frame loop and close the window."""
        Logger.log("start stop_view(self)")
        if not self.running:
            return
        self.running = False
        if self._after_id is not None:
            self.root.after_cancel(self._after_id)
            self._after_id = None
        self.root.quit()
        self.root.destroy()
        Logger.log(f"end stop_view(self)")
