import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('estudiantes', '0001_initial'),
        ('usuarios', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='TipoGravedad',
            fields=[
                ('id', models.BigAutoField(db_column='id_gravedad', primary_key=True, serialize=False)),
                ('nombre_gravedad', models.CharField(max_length=50, unique=True)),
                ('descripcion', models.CharField(blank=True, default='', max_length=255)),
                ('puntos', models.PositiveIntegerField(default=0)),
            ],
            options={
                'verbose_name': 'Tipo de gravedad',
                'verbose_name_plural': 'Tipos de gravedad',
                'db_table': 'tipogravedad',
                'ordering': ['puntos', 'nombre_gravedad'],
            },
        ),
        migrations.CreateModel(
            name='Conducta',
            fields=[
                ('id', models.BigAutoField(db_column='id_conducta', primary_key=True, serialize=False)),
                ('nombre_conducta', models.CharField(max_length=100)),
                ('descripcion', models.TextField(blank=True, default='')),
                ('activo', models.BooleanField(default=True)),
                ('gravedad', models.ForeignKey(
                    db_column='id_gravedad',
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='conductas',
                    to='comportamiento.tipogravedad',
                )),
            ],
            options={
                'db_table': 'conducta',
                'ordering': ['nombre_conducta'],
            },
        ),
        migrations.CreateModel(
            name='RegistroConducta',
            fields=[
                ('id', models.BigAutoField(db_column='id_registro', primary_key=True, serialize=False)),
                ('fecha_registro', models.DateField()),
                ('acciones_tomadas', models.TextField(blank=True, default='')),
                ('comentarios', models.TextField(blank=True, default='')),
                ('evidencia_url', models.CharField(blank=True, default='', max_length=500)),
                ('leido', models.BooleanField(default=False)),
                ('fecha_lectura', models.DateField(blank=True, null=True)),
                ('estado', models.CharField(
                    choices=[('ACTIVO', 'Activo'), ('RESUELTO', 'Resuelto')], default='ACTIVO', max_length=20
                )),
                ('conducta', models.ForeignKey(
                    db_column='id_conducta',
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='registros',
                    to='comportamiento.conducta',
                )),
                ('docente', models.ForeignKey(
                    db_column='id_docente',
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='registros',
                    to='usuarios.docente',
                )),
                ('estudiante', models.ForeignKey(
                    db_column='id_estudiante',
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='registros',
                    to='estudiantes.estudiante',
                )),
            ],
            options={
                'verbose_name': 'Registro de conducta',
                'verbose_name_plural': 'Registros de conducta',
                'db_table': 'registroconductas',
                'ordering': ['-fecha_registro', '-id'],
            },
        ),
        migrations.CreateModel(
            name='Observacion',
            fields=[
                ('id', models.BigAutoField(db_column='id_observacion', primary_key=True, serialize=False)),
                ('tipo_observacion', models.CharField(max_length=50)),
                ('descripcion', models.TextField()),
                ('fecha', models.DateField()),
                ('leido', models.BooleanField(default=False)),
                ('fecha_lectura', models.DateField(blank=True, null=True)),
                ('docente', models.ForeignKey(
                    db_column='id_docente',
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='observaciones',
                    to='usuarios.docente',
                )),
                ('estudiante', models.ForeignKey(
                    db_column='id_estudiante',
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='observaciones',
                    to='estudiantes.estudiante',
                )),
            ],
            options={
                'verbose_name': 'Observación',
                'verbose_name_plural': 'Observaciones',
                'db_table': 'observaciones',
                'ordering': ['-fecha', '-id'],
            },
        ),
    ]
