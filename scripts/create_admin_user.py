"""
Script para crear la cuenta admin que recibe los ingresos de la plataforma
Ejecutar desde la raíz del proyecto: python scripts/create_admin_user.py
"""
import sys
import os

# Agregar el directorio raíz al path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.config.settings import settings
from app.config.database import Base, engine, SessionLocal
from app.shared.database.models import User

def create_admin_user():
    """Crear (o promover) la cuenta admin configurada en ADMIN_EMAIL"""

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()

    try:
        admin = db.query(User).filter(User.email == settings.admin_email).first()

        if admin and admin.role == "admin":
            print(f"✅ La cuenta admin ya existe: {admin.email} (ingresos: {admin.income})")
            return

        if admin:
            admin.role = "admin"
            print(f"⬆️  Usuario promovido a admin: {admin.email}")
        else:
            admin = User(
                email=settings.admin_email,
                name="Admin",
                role="admin",
                income=0
            )
            db.add(admin)
            print(f"✅ Cuenta admin creada: {settings.admin_email}")

        db.commit()

    except Exception as e:
        db.rollback()
        print(f"❌ Error creando cuenta admin: {e}")
        raise

    finally:
        db.close()

if __name__ == "__main__":
    create_admin_user()
