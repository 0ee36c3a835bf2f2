# src/window_switcher/widgets/window.py
"""
Window list widget for the switcher panel.

Shows the ranked window entries as a list of title/app rows and keeps the
highlighted row in sync with the controller's selection cursor.
"""

from gi.repository import Gtk

from ..utils.widget_pool import WidgetPool


class WindowRow(Gtk.ListBoxRow):
    """
    One entry: window title on top, application name below.

    Attributes:
        record: WindowRecord currently shown
    """

    def __init__(self):
        super().__init__()
        self.record = None

        box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=4)
        box.set_margin_top(8)
        box.set_margin_bottom(8)
        box.set_margin_start(8)
        box.set_margin_end(8)

        self._title = Gtk.Label(xalign=0)
        self._title.add_css_class('heading')
        self._app = Gtk.Label(xalign=0)
        self._app.add_css_class('dim-label')

        box.append(self._title)
        box.append(self._app)
        self.set_child(box)

    def set_record(self, record):
        self.record = record
        self._title.set_label(record.label)
        self._app.set_label(record.app)


class WindowList(Gtk.ScrolledWindow):
    """
    Scrollable list of window entries.

    Attributes:
        _controller: PanelController notified of row clicks
        _list_box (Gtk.ListBox): Row container
        _row_pool (WidgetPool): Recycled WindowRow widgets
        _rows (list): Rows currently in the list, in display order
    """

    def __init__(self, controller):
        super().__init__()
        self.set_vexpand(True)
        self.set_policy(Gtk.PolicyType.NEVER, Gtk.PolicyType.AUTOMATIC)

        self._controller = controller
        self._row_pool = WidgetPool(WindowRow)
        self._rows = []

        self._list_box = Gtk.ListBox()
        self._list_box.set_selection_mode(Gtk.SelectionMode.SINGLE)
        self._list_box.connect('row-activated', self._on_row_activated)
        self.set_child(self._list_box)

    def set_entries(self, entries, selected_index):
        """
        Replace the rows with ``entries`` and highlight one of them.

        Args:
            entries: MatchedEntry list in display order
            selected_index (int): Row to highlight
        """
        for departed_row in self._rows:
            self._list_box.remove(departed_row)
            self._row_pool.release(departed_row)
        self._rows = []

        for entry in entries:
            row = self._row_pool.acquire()
            row.set_record(entry.record)
            self._list_box.append(row)
            self._rows.append(row)

        self.select(selected_index)

    def select(self, index):
        """Highlight the row at ``index`` and scroll it into view."""
        if not 0 <= index < len(self._rows):
            self._list_box.unselect_all()
            return
        row = self._rows[index]
        self._list_box.select_row(row)
        adjustment = self.get_vadjustment()
        allocation = row.get_allocation()
        adjustment.clamp_page(allocation.y, allocation.y + allocation.height)

    def _on_row_activated(self, list_box, row):
        if row in self._rows:
            self._controller.focus_entry(self._rows.index(row))
