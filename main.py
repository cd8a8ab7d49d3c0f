from contact_form.config import FormConfig
from contact_form.console import ConsoleRenderer
from contact_form.controller import FormController
from contact_form.logging_config import setup_logging


def main():
    sessions = [
        {"first_name": "Ada", "last_name": " ", "phone": "", "email": "ada.x.io"},
        {"last_name": "Lovelace", "phone": "5551234", "email": "ada@x.io"},
    ]

    # load config
    cfg = FormConfig.from_env()
    logger = setup_logging(cfg.level)

    renderer = ConsoleRenderer(title=cfg.title)

    with FormController() as form:
        setters = {
            "first_name": form.set_first_name,
            "last_name": form.set_last_name,
            "phone": form.set_phone,
            "email": form.set_email,
        }

        # every published state is rendered
        renderer.attach(form)

        state = None
        for i, edits in enumerate(sessions, 1):
            for field, value in edits.items():
                setters[field](value)

            print(f"\nSUBMIT #{i}")
            state = form.submit()

        logger.info("final state valid: %s", state.is_valid)


if __name__ == "__main__":
    main()
