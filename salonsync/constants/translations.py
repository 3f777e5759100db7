"""UI strings for the supported languages."""

LANGUAGES = ("hu", "en", "ro")

# Speech recognition / date formatting locale per language
LOCALES = {"hu": "hu-HU", "en": "en-US", "ro": "ro-RO"}

LANGUAGE_NAMES = {"hu": "Hungarian", "en": "English", "ro": "Romanian"}

TRANSLATIONS = {
    "hu": {
        "dashboard": "Főoldal",
        "month": "Hónap",
        "clients": "Vendégek",
        "settings": "Beállítások",
        "assistant": "Asszisztens",
        "appointments": "Mai foglalások",
        "nextClient": "Következő vendég",
        "newAppt": "Új foglalás",
        "editAppt": "Foglalás szerkesztése",
        "client": "Vendég",
        "service": "Szolgáltatás",
        "optional": "(opcionális)",
        "date": "Dátum",
        "time": "Időpont",
        "notes": "Megjegyzés",
        "delete": "Törlés",
        "cancel": "Mégse",
        "save": "Mentés",
        "addClient": "Új vendég",
        "search": "Keresés...",
        "name": "Név",
        "phone": "Telefon",
        "theme": "Megjelenés",
        "light": "Világos",
        "dark": "Sötét",
        "wakeWord": "Ébresztő szó",
        "sayLuxe": "Mondd: \"Sync\"",
        "businessHours": "Nyitvatartás",
        "start": "Kezdés",
        "end": "Zárás",
        "serviceDurations": "Szolgáltatások időtartama",
        "minutes": "perc",
        "listening": "Figyelek...",
        "voiceActive": "A hangasszisztens aktív",
        "voiceRecording": "Felvétel (16 kHz PCM, üres = bezárás)",
        "free": "Szabad",
        "moderate": "Közepes",
        "busy": "Foglalt",
        "selectLang": "Nyelv",
        "professionLabel": "Szakma",
        "hair": "Fodrász",
        "nails": "Körmös",
        "cosmetics": "Kozmetikus",
        "specLabel": "Szakterület",
        "women": "Női",
        "men": "Férfi",
        "unisex": "Uniszex",
        "continue": "Tovább",
        "today": "Ma",
        "guest": "Vendég",
        "general": "Általános",
        "micPermission": "Nem sikerült hozzáférni a mikrofonhoz.",
        "saveError": "Hiba a mentés során.",
        "deleteError": "Hiba a törlés során.",
        "deleteConfirm": "Biztosan törölni szeretnéd?",
        "genericError": "Hiba történt.",
        "login": "Bejelentkezés",
        "register": "Regisztráció",
        "email": "Email",
        "password": "Jelszó",
        "logout": "Kijelentkezés",
        "analyzeDay": "Nap elemzése",
        "generateMessage": "Emlékeztető üzenet",
        "messageFallback": "Nem sikerült az üzenet generálása.",
        "messageError": "Hiba történt az AI kapcsolatban.",
        "analysisFallback": "Nem sikerült elemezni a beosztást.",
        "analysisError": "Hiba történt az elemzés során.",
        "defaultService": "Hajvágás",
        "unknownService": "Ismeretlen",
    },
    "en": {
        "dashboard": "Home",
        "month": "Month",
        "clients": "Clients",
        "settings": "Settings",
        "assistant": "Assistant",
        "appointments": "Today's bookings",
        "nextClient": "Next client",
        "newAppt": "New booking",
        "editAppt": "Edit booking",
        "client": "Client",
        "service": "Service",
        "optional": "(optional)",
        "date": "Date",
        "time": "Time",
        "notes": "Notes",
        "delete": "Delete",
        "cancel": "Cancel",
        "save": "Save",
        "addClient": "New client",
        "search": "Search...",
        "name": "Name",
        "phone": "Phone",
        "theme": "Appearance",
        "light": "Light",
        "dark": "Dark",
        "wakeWord": "Wake word",
        "sayLuxe": "Say: \"Sync\"",
        "businessHours": "Business hours",
        "start": "Opens",
        "end": "Closes",
        "serviceDurations": "Service durations",
        "minutes": "min",
        "listening": "Listening...",
        "voiceActive": "Voice assistant is active",
        "voiceRecording": "Recording (16 kHz PCM, empty = close)",
        "free": "Free",
        "moderate": "Moderate",
        "busy": "Busy",
        "selectLang": "Language",
        "professionLabel": "Profession",
        "hair": "Hairdresser",
        "nails": "Nail technician",
        "cosmetics": "Beautician",
        "specLabel": "Specialization",
        "women": "Women",
        "men": "Men",
        "unisex": "Unisex",
        "continue": "Continue",
        "today": "Today",
        "guest": "Guest",
        "general": "General",
        "micPermission": "Could not access the microphone.",
        "saveError": "Could not save the booking.",
        "deleteError": "Could not delete the booking.",
        "deleteConfirm": "Are you sure you want to delete it?",
        "genericError": "Something went wrong.",
        "login": "Sign in",
        "register": "Sign up",
        "email": "Email",
        "password": "Password",
        "logout": "Sign out",
        "analyzeDay": "Analyze day",
        "generateMessage": "Reminder message",
        "messageFallback": "Could not generate the message.",
        "messageError": "The AI service is unavailable.",
        "analysisFallback": "Could not analyze the schedule.",
        "analysisError": "The schedule analysis failed.",
        "defaultService": "Haircut",
        "unknownService": "Unknown",
    },
    "ro": {
        "dashboard": "Acasă",
        "month": "Lună",
        "clients": "Clienți",
        "settings": "Setări",
        "assistant": "Asistent",
        "appointments": "Programări azi",
        "nextClient": "Următorul client",
        "newAppt": "Programare nouă",
        "editAppt": "Editare programare",
        "client": "Client",
        "service": "Serviciu",
        "optional": "(opțional)",
        "date": "Data",
        "time": "Ora",
        "notes": "Notițe",
        "delete": "Șterge",
        "cancel": "Anulează",
        "save": "Salvează",
        "addClient": "Client nou",
        "search": "Caută...",
        "name": "Nume",
        "phone": "Telefon",
        "theme": "Aspect",
        "light": "Luminos",
        "dark": "Întunecat",
        "wakeWord": "Cuvânt de activare",
        "sayLuxe": "Spune: \"Sync\"",
        "businessHours": "Program",
        "start": "Deschidere",
        "end": "Închidere",
        "serviceDurations": "Durata serviciilor",
        "minutes": "min",
        "listening": "Ascult...",
        "voiceActive": "Asistentul vocal este activ",
        "voiceRecording": "Înregistrare (16 kHz PCM, gol = închide)",
        "free": "Liber",
        "moderate": "Moderat",
        "busy": "Ocupat",
        "selectLang": "Limba",
        "professionLabel": "Profesie",
        "hair": "Coafor",
        "nails": "Manichiură",
        "cosmetics": "Cosmetică",
        "specLabel": "Specializare",
        "women": "Femei",
        "men": "Bărbați",
        "unisex": "Unisex",
        "continue": "Continuă",
        "today": "Azi",
        "guest": "Client",
        "general": "General",
        "micPermission": "Nu s-a putut accesa microfonul.",
        "saveError": "Eroare la salvare.",
        "deleteError": "Eroare la ștergere.",
        "deleteConfirm": "Sigur doriți să ștergeți?",
        "genericError": "A apărut o eroare.",
        "login": "Autentificare",
        "register": "Înregistrare",
        "email": "Email",
        "password": "Parolă",
        "logout": "Deconectare",
        "analyzeDay": "Analiza zilei",
        "generateMessage": "Mesaj de reamintire",
        "messageFallback": "Mesajul nu a putut fi generat.",
        "messageError": "Serviciul AI nu este disponibil.",
        "analysisFallback": "Programul nu a putut fi analizat.",
        "analysisError": "Analiza programului a eșuat.",
        "defaultService": "Tuns",
        "unknownService": "Necunoscut",
    },
}

# Messages for known authentication error codes
AUTH_ERRORS = {
    "hu": {
        "auth/invalid-email": "Érvénytelen email cím.",
        "auth/user-not-found": "Hibás email vagy jelszó.",
        "auth/wrong-password": "Hibás email vagy jelszó.",
        "auth/email-already-in-use": "Ez az email már regisztrálva van.",
        "auth/weak-password": "A jelszó túl gyenge (min 6 karakter).",
    },
    "en": {
        "auth/invalid-email": "Invalid email address.",
        "auth/user-not-found": "Wrong email or password.",
        "auth/wrong-password": "Wrong email or password.",
        "auth/email-already-in-use": "This email is already registered.",
        "auth/weak-password": "The password is too weak (min 6 characters).",
    },
    "ro": {
        "auth/invalid-email": "Adresă de email invalidă.",
        "auth/user-not-found": "Email sau parolă greșită.",
        "auth/wrong-password": "Email sau parolă greșită.",
        "auth/email-already-in-use": "Acest email este deja înregistrat.",
        "auth/weak-password": "Parola este prea slabă (min. 6 caractere).",
    },
}

MONTH_NAMES = [
    "Január / January", "Február / February", "Március / March",
    "Április / April", "Május / May", "Június / June",
    "Július / July", "Augusztus / August", "Szeptember / September",
    "Október / October", "November / November", "December / December",
]

WEEKDAY_HEADERS = ["H/M", "K/T", "Sz/W", "Cs/T", "P/F", "Sz/S", "V/S"]


def t(lang: str) -> dict:
    """Returns the string table for a language, falling back to Hungarian."""
    return TRANSLATIONS.get(lang, TRANSLATIONS["hu"])
