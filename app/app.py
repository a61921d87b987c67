import logging
from core.config import API_TOKEN, BASE_URL, LOG_DIR, LOG_LEVEL, REQUEST_TIMEOUT, TASKS_COLLECTION
from core.logging_setup import setup_logging
from storage.pocketbase import PocketBaseClient
from controller.book_controller import BookController
from controller.task_controller import TaskController
from gui.main_window import MainWindow

logger = logging.getLogger(__name__)


def main():
    log_file = setup_logging(log_dir=LOG_DIR, console_level=LOG_LEVEL)
    logger.info("Starting; PocketBase at %s (collection %r), log file %s",
                BASE_URL, TASKS_COLLECTION, log_file)

    if not BASE_URL.strip():
        # sin URL no abrimos la ventana
        logger.error("PB_BASE_URL is empty")
        print("Config error: set PB_BASE_URL (environment or .env)")
        return

    client = PocketBaseClient(BASE_URL, token=API_TOKEN, collection=TASKS_COLLECTION,
                              timeout=REQUEST_TIMEOUT)
    ui = MainWindow(TaskController(client), BookController())
    ui.mainloop()


if __name__ == "__main__":
    main()
